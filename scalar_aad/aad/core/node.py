# scalar_aad/aad/core/node.py
from enum import Enum


class Op(str, Enum):
    """
    Tag recorded on every Scalar produced by a primitive operation.

    The tag is used for rendering and graph statistics only; the gradient rule
    lives on the node itself (`Scalar._backward`).

    Members
    -------
    NOP  : leaf node (created from a literal number)
    ADD  : x + y
    MUL  : x * y
    POW  : x ** k, k a plain number
    RELU : max(0, x)
    """
    NOP = ""
    ADD = "+"
    MUL = "*"
    POW = "^"
    RELU = "ReLU"

    def __str__(self):
        return self.value
