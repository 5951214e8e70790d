"""
Hardcoded chain checkpoints used to pick where initial sync starts.

A new wallet only needs blocks mined after it was created, so sync starts
from the newest checkpoint older than the wallet.
"""
from collections.abc import Sequence
from datetime import UTC, datetime

from domain.models.checkpoint import BlockHeader, Checkpoint

MAINNET_CHECKPOINTS: tuple[Checkpoint, ...] = (
    Checkpoint(
        height=400000,
        header=BlockHeader(
            version=4,
            prev_block='66aa54b9a85e32c3d466fe38cbd40553120a32e15f99b107e31c20a6f56882e7',
            merkle_root='5f19fc2b20e25c9ebdc373fd7b4fe49d164b0d139f1121e603f956a1ae8d0b28',
            timestamp=datetime.fromtimestamp(1529796056, tz=UTC),
            bits=453089485,
            nonce=0,
        ),
        block_hash='9491894ab30da4bae4e8a2ca9547f2f6a01ac29fc4006342cc690fd61dbe55b3',
    ),
)


def validate_checkpoints(checkpoints: Sequence[Checkpoint]) -> None:
    """Raise ValueError unless the table is non-empty and ordered by height and time."""
    if not checkpoints:
        raise ValueError('Checkpoint table is empty')

    for previous, current in zip(checkpoints, checkpoints[1:]):
        if current.height <= previous.height:
            raise ValueError(f'Checkpoint heights out of order at {current.height}')
        if current.header.timestamp <= previous.header.timestamp:
            raise ValueError(f'Checkpoint timestamps out of order at {current.height}')

    for checkpoint in checkpoints:
        if len(checkpoint.block_hash) != 64:
            raise ValueError(f'Invalid block hash for checkpoint {checkpoint.height}')


def select_checkpoint(
    wallet_created: datetime, checkpoints: Sequence[Checkpoint] = MAINNET_CHECKPOINTS
) -> Checkpoint:
    """Latest checkpoint mined before ``wallet_created``, else the earliest one.

    Naive datetimes are taken to be UTC.
    """
    if wallet_created.tzinfo is None:
        wallet_created = wallet_created.replace(tzinfo=UTC)

    for checkpoint in reversed(checkpoints):
        if wallet_created > checkpoint.header.timestamp:
            return checkpoint
    return checkpoints[0]


validate_checkpoints(MAINNET_CHECKPOINTS)
