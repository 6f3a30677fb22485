from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RenderOptions:
    indent: str = "  "
    final_newline: bool = True
