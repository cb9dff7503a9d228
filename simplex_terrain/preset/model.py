from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class FbmPreset:
    id: str
    octaves: int
    base_frequency: float
    base_amplitude: float
    blend: float
    normalize_min: float
    normalize_max: float
    legacy_bounds: bool = False

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "FbmPreset":
        fbm = dict(cfg.get("fbm", {}))
        norm = dict(cfg.get("normalize", {}))
        return cls(
            id=str(cfg["id"]),
            octaves=int(fbm["octaves"]),
            base_frequency=float(fbm["base_frequency"]),
            base_amplitude=float(fbm["base_amplitude"]),
            blend=float(cfg["blend"]),
            normalize_min=float(norm["min"]),
            normalize_max=float(norm["max"]),
            legacy_bounds=bool(norm.get("legacy_bounds", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "fbm": {
                "octaves": self.octaves,
                "base_frequency": self.base_frequency,
                "base_amplitude": self.base_amplitude,
            },
            "blend": self.blend,
            "normalize": {
                "min": self.normalize_min,
                "max": self.normalize_max,
                "legacy_bounds": bool(self.legacy_bounds),
            },
        }
