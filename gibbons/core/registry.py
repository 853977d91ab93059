"""
Activation registry.

Maps names to activation callables so network vertices can be labeled with
``'tanh'`` instead of importing the function. Registration is explicit
(decorator or ``register``); lookup is a dict access.

Example:
    >>> from gibbons.core.registry import register_activation, get_activation
    >>>
    >>> @register_activation('softsign')
    ... def softsign(x):
    ...     return x / (1 + x.abs())
    >>>
    >>> get_activation('softsign') is softsign
    True
"""

import inspect
import logging
from typing import Callable, Dict, List, Union

import torch
import torch.nn.functional as F


logger = logging.getLogger(__name__)

Activation = Callable[[torch.Tensor], torch.Tensor]
ActivationName = str


def identity(x: torch.Tensor) -> torch.Tensor:
    """Pass the input through unchanged."""
    return x


BUILTIN_ACTIVATIONS: Dict[ActivationName, Activation] = {
    'tanh': torch.tanh,
    'sigmoid': torch.sigmoid,
    'relu': torch.relu,
    'gelu': F.gelu,
    'identity': identity,
}

DEFAULT_ACTIVATION: ActivationName = 'tanh'


class ActivationRegistry:
    """
    Global registry of activation functions.

    Design principles:
    - Explicit registration (decorator)
    - Fast lookup (O(1) dict access)
    - Clear errors (list what is available)

    Example:
        >>> ActivationRegistry.get('relu') is torch.relu
        True
        >>> ActivationRegistry.set_default('relu')
        >>> ActivationRegistry.get_default() is torch.relu
        True
    """

    # Name -> callable
    _registry: Dict[ActivationName, Activation] = dict(BUILTIN_ACTIVATIONS)

    # Track registration metadata for debugging
    _metadata: Dict[ActivationName, Dict] = {}

    _default: ActivationName = DEFAULT_ACTIVATION

    @classmethod
    def register(cls, name: ActivationName, override: bool = False) -> Callable:
        """
        Register an activation.

        Args:
            name: Unique activation name
            override: Allow replacing an existing activation (default: False)

        Returns:
            Decorator function

        Raises:
            ValueError: If name is already registered and override=False
        """
        def decorator(fn: Activation) -> Activation:
            if name in cls._registry and not override:
                existing = cls._registry[name]
                raise ValueError(
                    f"Activation '{name}' already registered "
                    f"(existing: {getattr(existing, '__qualname__', existing)!r}). "
                    f"Use override=True to replace."
                )

            cls._registry[name] = fn
            cls._metadata[name] = {
                'module': getattr(fn, '__module__', None),
                'name': getattr(fn, '__qualname__', repr(fn)),
                'doc': inspect.getdoc(fn),
            }
            logger.debug(f"registered activation '{name}'")

            return fn

        return decorator

    @classmethod
    def get(cls, name: ActivationName) -> Activation:
        """
        Get a registered activation.

        Raises:
            ValueError: If no activation has this name
        """
        if name not in cls._registry:
            available = sorted(cls._registry.keys())
            raise ValueError(
                f"Activation '{name}' not found. "
                f"Available activations: {available}"
            )
        return cls._registry[name]

    @classmethod
    def has(cls, name: ActivationName) -> bool:
        """Check if an activation is registered."""
        return name in cls._registry

    @classmethod
    def list_activations(cls) -> List[ActivationName]:
        """List registered activation names."""
        return sorted(cls._registry.keys())

    @classmethod
    def metadata(cls, name: ActivationName) -> Dict:
        """Registration metadata for a user-registered activation."""
        return dict(cls._metadata.get(name, {}))

    @classmethod
    def set_default(cls, name: ActivationName) -> None:
        """
        Set the activation used when a neuron is built without one.

        Raises:
            ValueError: If no activation has this name
        """
        cls.get(name)
        cls._default = name

    @classmethod
    def get_default(cls) -> Activation:
        """The current default activation."""
        return cls.get(cls._default)

    @classmethod
    def default_name(cls) -> ActivationName:
        return cls._default

    @classmethod
    def clear(cls) -> None:
        """
        Reset to the built-in activations (mainly for testing).
        """
        cls._registry.clear()
        cls._registry.update(BUILTIN_ACTIVATIONS)
        cls._metadata.clear()
        cls._default = DEFAULT_ACTIVATION


def register_activation(name: ActivationName, override: bool = False) -> Callable:
    """
    Register an activation (convenience wrapper).

    Example:
        >>> @register_activation('swish')
        ... def swish(x):
        ...     return x * torch.sigmoid(x)
    """
    return ActivationRegistry.register(name, override)


def get_activation(name: ActivationName) -> Activation:
    """Get an activation by name (convenience wrapper)."""
    return ActivationRegistry.get(name)


def resolve_activation(activation: Union[ActivationName, Activation, None] = None) -> Activation:
    """
    Turn a name, a callable or None into an activation callable.

    Args:
        activation: Registered name, any callable, or None for the default

    Returns:
        Activation callable

    Raises:
        ValueError: If a name is not registered
        TypeError: If activation is neither a string nor callable
    """
    if activation is None:
        return ActivationRegistry.get_default()
    if isinstance(activation, str):
        return ActivationRegistry.get(activation)
    if callable(activation):
        return activation
    raise TypeError(
        f"Activation must be a name or a callable, got {type(activation).__name__}"
    )
