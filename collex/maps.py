from .types import *


def map_entries(mapping: Optional[Mapping[K, V]], f: Callable[[K, V], Tuple[U, Any]]) -> Optional[Dict[U, Any]]:
    """builds a new dict from the (key, value) pairs returned by `f`, keeping order"""
    if mapping is None:
        return None
    result = {}
    for key, value in mapping.items():
        new_key, new_value = f(key, value)
        result[new_key] = new_value
    return result


def map_defined_entries(mapping: Optional[Mapping[K, V]],
                        f: Callable[[K, V], Optional[Tuple[Optional[U], Any]]]) -> Optional[Dict[U, Any]]:
    """like map_entries, but drops entries where `f` returns none or a pair with a none side"""
    if mapping is None:
        return None
    result = {}
    for key, value in mapping.items():
        entry = f(key, value)
        if entry is None:
            continue
        new_key, new_value = entry
        if new_key is not None and new_value is not None:
            result[new_key] = new_value
    return result


def map_defined_values(values: Optional[Set[T]], f: Callable[[T], Optional[U]]) -> Optional[Set[U]]:
    if values is None:
        return None
    result = set()
    for value in values:
        new_value = f(value)
        if new_value is not None:
            result.add(new_value)
    return result


def get_or_update(mapping: Dict[K, V], key: K, callback: Callable[[], V]) -> V:
    """returns mapping[key], creating it with `callback()` on first access"""
    if key in mapping:
        return mapping[key]
    value = callback()
    mapping[key] = value
    return value


def try_add_to_set(values: Set[T], value: T) -> bool:
    """adds `value` and reports whether it was new"""
    if value in values:
        return False
    values.add(value)
    return True
