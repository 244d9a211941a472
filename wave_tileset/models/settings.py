from dataclasses import dataclass

from .adjacency import Direction


@dataclass
class LoaderSettings:
    """
    Settings that control how a tileset file is turned into a model.
    """
    default_weight: float = 1.0                     # weight of tiles without a `weight` attribute
    reference_direction: Direction = Direction.EAST  # where `right` sits relative to `left`
    warn_unknown_attributes: bool = True

    def to_dict(self) -> dict:
        return {
            'default_weight': self.default_weight,
            'reference_direction': self.reference_direction.value,
            'warn_unknown_attributes': self.warn_unknown_attributes
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'LoaderSettings':
        return cls(
            default_weight=float(data.get('default_weight', 1.0)),
            reference_direction=Direction.parse(data.get('reference_direction', 'E')),
            warn_unknown_attributes=data.get('warn_unknown_attributes', True)
        )
