from tagging.methods import Method


def _replace(env, args):
    if len(args) < 3:
        return None
    old, new, text = args[0], args[1], "|".join(args[2:])
    return text.replace(old, new)


METHODS = (
    Method("upper", simple=lambda env: "", complex=lambda env, text: text.upper()),
    Method("lower", simple=lambda env: "", complex=lambda env, text: text.lower()),
    Method("length", simple=lambda env: "0", complex=lambda env, text: str(len(text))),
    Method("trim", simple=lambda env: "", complex=lambda env, text: text.strip()),
    # {replace:old|new|text}
    Method("replace", complex=_replace, split=True),
)
