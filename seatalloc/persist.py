'''Store allocator setups as JSON-ready dictionaries.

An allocator is fully configured by its constructor parameters. The
:func:`simple_serialization` class decorator records those parameter names;
:func:`to_dict` then stores the allocator class and the parameter values,
and :func:`from_dict` builds an equal allocator from such a dictionary.
Enumeration members are stored as their plain values, which the allocator
constructors accept.

Only allocator classes from the seatalloc package can be restored.
'''

import enum
import inspect
import importlib
from typing import Any, Dict, List

import seatalloc.evaluate.core


PACKAGE = 'seatalloc'

ATOMIC_TYPES: List[type] = [str, int, float, bool, type(None)]


def simple_serialization(class_: type) -> type:
    '''A decorator recording the constructor parameters of an allocator.

    The allocator must keep every constructor parameter as an attribute of
    the same name, in a form its constructor accepts again.

    :param class_: The allocator class to mark.
    '''
    param_names = list(inspect.signature(class_.__init__).parameters.keys())
    class_.setup_params = [name for name in param_names if name != 'self']
    return class_


def to_dict(allocator: Any) -> Dict[str, Any]:
    """Serialize an allocator setup to a JSON-ready dictionary.

    :param allocator: An allocator marked by :func:`simple_serialization`.
    """
    cls = allocator.__class__
    if not hasattr(cls, 'setup_params'):
        raise ValueError(f'cannot serialize {allocator!r} to dict format')
    out_dict = {'class': '.'.join((cls.__module__, cls.__name__))}
    for param in cls.setup_params:
        out_dict[param] = _setup_value(getattr(allocator, param))
    return out_dict


def from_dict(value: Dict[str, Any]) -> seatalloc.evaluate.core.SeatAllocator:
    """Construct an allocator from a dictionary created by :func:`to_dict`.

    Raises ValueError for anything that does not define a seatalloc
    allocator with valid parameters.
    """
    if not isinstance(value, dict):
        raise ValueError('invalid seatalloc object def: dict expected, '
                         f'got {value!r}')
    elif 'class' not in value:
        raise ValueError('invalid seatalloc object def: must have a class key')
    cls = _allocator_class(value['class'])
    params = {key: val for key, val in value.items() if key != 'class'}
    try:
        return cls(**params)
    except (KeyError, TypeError) as err:
        raise ValueError(f'invalid seatalloc class def: {value!r}') from err


def _setup_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    elif isinstance(value, tuple(ATOMIC_TYPES)):
        return value
    raise ValueError(f'cannot serialize {value!r} to dict format')


def _allocator_class(identifier: Any) -> type:
    if not (
        isinstance(identifier, str)
        and identifier.startswith(PACKAGE + '.')
        and all(chunk.isidentifier() for chunk in identifier.split('.'))
    ):
        raise ValueError(f'invalid seatalloc class def: {identifier!r}')
    module_name, name = identifier.rsplit('.', 1)
    try:
        cls = getattr(importlib.import_module(module_name), name)
    except (ImportError, AttributeError) as err:
        raise ValueError(f'invalid seatalloc class def: {identifier}') from err
    if not (isinstance(cls, type)
            and issubclass(cls, seatalloc.evaluate.core.SeatAllocator)):
        raise ValueError(f'not a seatalloc allocator: {identifier}')
    return cls
