from ._stateless_mixin import StatelessConfigMixin

__all__ = [StatelessConfigMixin.__name__]
