"""
Tree shape generation.

A shape is an unlabeled binary tree written in prefix order as a bit string:
1 for a branch (followed by its two subtrees), 0 for a leaf. A tree with n
leaves has n-1 branches and 2n-1 nodes, so every shape of n leaves is one of
the 2**(2n-1) bit strings of that width.
"""
import math
import numpy as np
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional, Tuple

LEAF: Tuple = ()


@dataclass(frozen=True)
class TreeShape:
  """Binary tree topology; no operators or values attached"""

  bits: str
  structure: tuple = field(compare=False, repr=False)

  def __post_init__(self):
    if parse_shape(self.bits) != self.structure:
      raise ValueError(f"Shape structure does not match bit string {self.bits!r}")

  @classmethod
  def from_bits(cls, bits: str) -> 'TreeShape':
    structure = parse_shape(bits)
    if structure is None:
      raise ValueError(f"Malformed shape bit string: {bits!r}")
    return cls(bits, structure)

  @property
  def leaf_count(self) -> int:
    return self.bits.count('0')

  @property
  def branch_count(self) -> int:
    return self.bits.count('1')


def _parse_from(bits: str, position: int):
  if position >= len(bits):
    return None, position
  if bits[position] == '0':
    return LEAF, position + 1
  left, position = _parse_from(bits, position + 1)
  if left is None:
    return None, position
  right, position = _parse_from(bits, position)
  if right is None:
    return None, position
  return (left, right), position


def parse_shape(bits: str) -> Optional[tuple]:
  """
  Parse a prefix bit string into nested tuples (``()`` leaf, ``(l, r)`` branch).

  Returns None when the string runs out mid-tree or has bits left over.
  """
  if set(bits) - {'0', '1'}:
    raise ValueError(f"Shape bit strings may only contain 0 and 1: {bits!r}")
  structure, consumed = _parse_from(bits, 0)
  if structure is None or consumed != len(bits):
    return None
  return structure


def count_leaves(structure: tuple) -> int:
  if structure == LEAF:
    return 1
  return sum(count_leaves(subtree) for subtree in structure)


@lru_cache(maxsize=None)
def _shapes_for(n: int) -> Tuple[TreeShape, ...]:
  width = 2 * n - 1
  shapes = []
  for candidate in range(2 ** width):
    bits = np.binary_repr(candidate, width=width)
    # Necessary, not sufficient: the parse below catches the rest
    if bits.count('1') != n - 1:
      continue
    structure = parse_shape(bits)
    if structure is None or count_leaves(structure) != n:
      continue
    shapes.append(TreeShape(bits, structure))
  return tuple(shapes)


def generate_shapes(n: int) -> List[TreeShape]:
  """Every binary tree topology with exactly n leaves, in ascending bit-string order"""
  if n < 1:
    raise ValueError(f"A tree needs at least one leaf, got n={n}")
  return list(_shapes_for(n))


def catalan(n: int) -> int:
  """Number of binary tree shapes with n+1 leaves"""
  if n < 0:
    raise ValueError(f"catalan is undefined for negative n={n}")
  return math.comb(2 * n, n) // (n + 1)
