"""
Symmetry classes of square tiles under the dihedral group of order 8.
Each class fixes how many orientations are distinct and how a quarter turn
(clockwise) and a mirror permute the local case numbers.
"""

from enum import Enum


class SymmetryClass(Enum):
    """Symmetry tag as written in the `symmetry` attribute."""
    X = 'X'           # fully symmetric
    I = 'I'           # straight line
    DIAGONAL = '\\'   # diagonal
    T = 'T'
    L = 'L'
    F = 'F'           # no symmetry

    @property
    def cardinality(self) -> int:
        """Number of distinct orientations."""
        return _CARDINALITY[self]

    def rotate(self, i: int) -> int:
        """Local case reached by one quarter turn."""
        if self is SymmetryClass.X:
            return i
        if self in (SymmetryClass.I, SymmetryClass.DIAGONAL):
            return 1 - i
        if self in (SymmetryClass.T, SymmetryClass.L):
            return (i + 1) % 4
        # F: two independent 4-cycles, plain and mirrored
        return (i + 1) % 4 if i < 4 else 4 + (i - 1) % 4

    def reflect(self, i: int) -> int:
        """Local case reached by mirroring."""
        if self in (SymmetryClass.X, SymmetryClass.I):
            return i
        if self is SymmetryClass.DIAGONAL:
            return 1 - i
        if self is SymmetryClass.T:
            return i if i % 2 == 0 else 4 - i
        if self is SymmetryClass.L:
            return i + 1 if i % 2 == 0 else i - 1
        return i + 4 if i < 4 else i - 4

    def action_row(self, t: int) -> tuple[int, ...]:
        """
        Local images of case `t` under the eight elementary operations:
        rotate 0/90/180/270, then the same four followed by a mirror.
        """
        r1 = self.rotate(t)
        r2 = self.rotate(r1)
        r3 = self.rotate(r2)
        return (
            t, r1, r2, r3,
            self.reflect(t), self.reflect(r1), self.reflect(r2), self.reflect(r3)
        )


_CARDINALITY = {
    SymmetryClass.X: 1,
    SymmetryClass.I: 2,
    SymmetryClass.DIAGONAL: 2,
    SymmetryClass.T: 4,
    SymmetryClass.L: 4,
    SymmetryClass.F: 8,
}


def resolve_symmetry(tag: str) -> tuple[SymmetryClass, bool]:
    """
    Look up a symmetry tag.
    Unknown tags fall back to X; the second value tells whether the tag was known.
    """
    try:
        return SymmetryClass(tag), True
    except ValueError:
        return SymmetryClass.X, False
