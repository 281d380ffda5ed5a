"""
Solid base analysis constants: registry prefix, default roots, fixed-layout builtins.
"""

# ANSI Cyan (\033[36m)
_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_SOLID_BASE_ART: str = r"""
   ____       ___    __   ___
  / __/__ ___/ (_)__/ /  / _ )___ ____ ___
 _\ \/ _ / _  / / _  /  / _  / _ `(_-</ -_)
/___/\___\_,_/_/\_,_/  /____/\_,_/___/\__/
"""
SOLID_BASE_BANNER = _CYAN + _SOLID_BASE_ART + _RESET

# Registry keys are "<prefix><code>", e.g. "solidbase.E9801".
RULE_PREFIX: str = "solidbase."

UNIVERSAL_ROOT: str = "builtins.object"

DEFAULT_MARKER_DECORATORS: frozenset[str] = frozenset(
    {
        "disjoint_base",
        "solid_base",
    }
)

# Slots that never add a per-instance field to the layout.
LAYOUT_NEUTRAL_SLOTS: frozenset[str] = frozenset({"__dict__", "__weakref__"})

STRUCTURAL_BASES: dict[str, str] = {
    "typing.Protocol": "Protocol",
    "typing_extensions.Protocol": "Protocol",
    "typing.TypedDict": "TypedDict",
    "typing_extensions.TypedDict": "TypedDict",
}

# Builtins whose C-level instance layout is fixed. Subclassing two of these
# that are unrelated is rejected by the interpreter.
DEFAULT_SOLID_BUILTINS: frozenset[str] = frozenset(
    {
        "builtins.int",
        "builtins.float",
        "builtins.complex",
        "builtins.str",
        "builtins.bytes",
        "builtins.bytearray",
        "builtins.tuple",
        "builtins.list",
        "builtins.dict",
        "builtins.set",
        "builtins.frozenset",
        "builtins.memoryview",
        "builtins.type",
        "builtins.property",
        "builtins.classmethod",
        "builtins.staticmethod",
        "builtins.super",
        "builtins.enumerate",
        "builtins.filter",
        "builtins.map",
        "builtins.zip",
        "builtins.reversed",
        "builtins.BaseException",
        "builtins.BaseExceptionGroup",
        "builtins.AttributeError",
        "builtins.ImportError",
        "builtins.NameError",
        "builtins.OSError",
        "builtins.StopIteration",
        "builtins.SyntaxError",
        "builtins.SystemExit",
        "builtins.UnicodeDecodeError",
        "builtins.UnicodeEncodeError",
        "builtins.UnicodeTranslateError",
        "collections.OrderedDict",
        "collections.defaultdict",
        "collections.deque",
    }
)

DEFAULT_TYPESHED_MODULES: tuple[str, ...] = ("builtins", "collections", "types")
