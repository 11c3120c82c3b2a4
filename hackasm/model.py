from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class AddressInstruction:
    value: str  # decimal literal or symbol name
    line_no: int = 0
    text: str = ""


@dataclass(frozen=True)
class ComputeInstruction:
    dest: Optional[str]
    comp: str
    jump: Optional[str]
    line_no: int = 0
    text: str = ""


@dataclass(frozen=True)
class LabelInstruction:
    value: str
    line_no: int = 0
    text: str = ""


Instruction = Union[AddressInstruction, ComputeInstruction, LabelInstruction]
