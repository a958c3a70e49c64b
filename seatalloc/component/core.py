'''Common functionality for components.

Functions to build registers of named components and retrievers around them.
There should normally be no need to use these functions directly.
'''

from typing import Any, Callable, Dict, Union


def getter(register: Dict[str, Any],
           name: str,
           kind: type,
           ) -> Callable[[str], Any]:
    '''A register retriever factory.'''
    def get(item_def: str) -> kind:
        f'''Return a {name} by its name.'''
        try:
            return register[item_def]
        except (KeyError, TypeError):
            raise KeyError(f'unknown {name}: {item_def}')
    return get


def constructer(register: Dict[str, Any],
                name: str,
                kind: type,
                ) -> Callable[[Union[str, Any]], Any]:
    '''A register implicit retriever/passthrough function factory.'''
    get = getter(register, name, kind)

    def construct(item_def: Union[str, kind]) -> kind:
        f'''Construct a {name}.

        Get a {name} from the register by its name. If an instance is given,
        pass it through unchanged.
        '''
        return item_def if isinstance(item_def, kind) else get(item_def)

    return construct


def register_functions(*args, **kwargs):
    '''Construct the getter and constructer functions at one call.'''
    return (
        getter(*args, **kwargs),
        constructer(*args, **kwargs),
    )
