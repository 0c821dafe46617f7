from tagging.methods import Method, split_params


def _set(env, params):
    name, value = (split_params(params, maxsplit=1) + [""])[:2]
    name = name.strip()
    if not name:
        return None
    env.put(name, value)
    return ""


def _get(env, name):
    value = env.get(name.strip())
    return "" if value is None else str(value)


def _exists(env, name):
    return "true" if name.strip() in env else "false"


METHODS = (
    # {set:name|value}
    Method("set", complex=_set),
    Method("get", complex=_get),
    Method("exists", complex=_exists),
)
