"""
Infrastructure layer: tensors, the operand algebra, backends, activation
kernels and runtime configuration.
"""
