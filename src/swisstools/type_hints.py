"""Type hints used in Swiss Tools."""

from typing import Dict, Optional

# Stable integer id assigned by the registry
PlayerId = int
# A real opponent id, or None for a bye
Opponent = Optional[PlayerId]
# Card name -> quantity
CardCounts = Dict[str, int]
