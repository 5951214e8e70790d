from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BlockHeader:
    version: int
    prev_block: str
    merkle_root: str
    timestamp: datetime
    bits: int
    nonce: int


@dataclass(frozen=True)
class Checkpoint:
    height: int
    header: BlockHeader
    block_hash: str
