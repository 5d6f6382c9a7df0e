from ._arithmetic import OperandMixinArithmetic
from ._reduction import OperandMixinReduction
from ._unary import OperandMixinUnary

__all__ = [
    OperandMixinArithmetic.__name__,
    OperandMixinReduction.__name__,
    OperandMixinUnary.__name__,
]
