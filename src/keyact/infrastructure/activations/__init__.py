from ._base import ActivationMixin
from ._celu import Celu
from ._relu import Relu
from ._serialization import (
    activation_from_config,
    activation_to_config,
    get_activation,
    register_activation,
)
from ._sigmoid import Sigmoid
from ._softmax import Softmax
from ._swish import Swish
from ._tanh import Tanh

__all__ = [
    "ActivationMixin",
    "Sigmoid",
    "Tanh",
    "Relu",
    "Swish",
    "Celu",
    "Softmax",
    "register_activation",
    "activation_to_config",
    "activation_from_config",
    "get_activation",
]
