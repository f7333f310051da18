from snowplow.core.nix.abc import Nix, NixResult
from snowplow.core.nix.real import RealNix

__all__ = [
    "Nix",
    "NixResult",
    "RealNix",
]
