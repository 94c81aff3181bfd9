"""
Built-in word lists - keywords and primitive types per language.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple


class UnknownLanguageError(KeyError):
    """Raised when a language id has no word list."""


@dataclass(frozen=True)
class WordList:
    """Raw words for one language, before de-duplication."""
    keywords: Tuple[str, ...]
    primitives: Tuple[str, ...]


_CPP = WordList(
    keywords=(
        "alignas", "alignof", "asm", "auto", "break", "case", "catch", "class",
        "co_await", "co_return", "co_yield", "concept", "const", "consteval",
        "constexpr", "constinit", "const_cast", "continue", "decltype", "default",
        "delete", "do", "dynamic_cast", "else", "enum", "explicit", "export",
        "extern", "false", "for", "friend", "goto", "if", "inline", "mutable",
        "namespace", "new", "noexcept", "nullptr", "operator", "private",
        "protected", "public", "register", "reinterpret_cast", "requires",
        "return", "sizeof", "static", "static_assert", "static_cast", "struct",
        "switch", "template", "this", "thread_local", "throw", "true", "try",
        "typedef", "typeid", "typename", "union", "using", "virtual", "volatile",
        "while",
    ),
    primitives=(
        "bool", "char", "char8_t", "char16_t", "char32_t", "wchar_t", "short",
        "int", "long", "signed", "unsigned", "float", "double", "void",
        "size_t", "int8_t", "int16_t", "int32_t", "int64_t", "uint8_t",
        "uint16_t", "uint32_t", "uint64_t", "auto",
    ),
)

_CSHARP = WordList(
    keywords=(
        "abstract", "as", "base", "break", "case", "catch", "checked", "class",
        "const", "continue", "default", "delegate", "do", "else", "enum",
        "event", "explicit", "extern", "false", "finally", "fixed", "for",
        "foreach", "goto", "if", "implicit", "in", "interface", "internal",
        "is", "lock", "namespace", "new", "null", "operator", "out", "override",
        "params", "private", "protected", "public", "readonly", "record", "ref",
        "return", "sealed", "sizeof", "stackalloc", "static", "struct",
        "switch", "this", "throw", "true", "try", "typeof", "unchecked",
        "unsafe", "using", "virtual", "volatile", "while", "async", "await",
        "var", "yield", "init", "with",
    ),
    primitives=(
        "bool", "byte", "sbyte", "char", "decimal", "double", "float", "int",
        "uint", "nint", "nuint", "long", "ulong", "short", "ushort", "object",
        "string", "dynamic", "void",
    ),
)

_JAVA = WordList(
    keywords=(
        "abstract", "assert", "break", "case", "catch", "class", "const",
        "continue", "default", "do", "else", "enum", "extends", "final",
        "finally", "for", "goto", "if", "implements", "import", "instanceof",
        "interface", "native", "new", "package", "private", "protected",
        "public", "return", "static", "strictfp", "super", "switch",
        "synchronized", "this", "throw", "throws", "transient", "try",
        "volatile", "while", "var", "yield", "record", "sealed", "permits",
        "non-sealed", "true", "false", "null",
    ),
    primitives=(
        "boolean", "byte", "char", "short", "int", "long", "float", "double",
        "void", "String",
    ),
)

_JAVASCRIPT = WordList(
    keywords=(
        "await", "break", "case", "catch", "class", "const", "continue",
        "debugger", "default", "delete", "do", "else", "export", "extends",
        "false", "finally", "for", "function", "if", "import", "in",
        "instanceof", "let", "new", "null", "return", "static", "super",
        "switch", "this", "throw", "true", "try", "typeof", "var", "void",
        "while", "with", "yield", "async", "of", "get", "set",
    ),
    primitives=(
        "undefined", "boolean", "number", "bigint", "string", "symbol",
        "null", "Object", "NaN", "Infinity",
    ),
)

_PYTHON = WordList(
    keywords=(
        "False", "None", "True", "and", "as", "assert", "async", "await",
        "break", "class", "continue", "def", "del", "elif", "else", "except",
        "finally", "for", "from", "global", "if", "import", "in", "is",
        "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try",
        "while", "with", "yield", "match", "case", "type",
    ),
    primitives=(
        "int", "float", "complex", "bool", "str", "bytes", "bytearray",
        "list", "tuple", "dict", "set", "frozenset", "range", "memoryview",
        "object",
    ),
)

# Menu order
LANGUAGE_WORDS: Dict[str, WordList] = {
    "C++": _CPP,
    "C#": _CSHARP,
    "Java": _JAVA,
    "Javascript": _JAVASCRIPT,
    "Python": _PYTHON,
}


def available_languages() -> List[str]:
    """Language ids in menu order."""
    return list(LANGUAGE_WORDS)


def get_words(language_id: str) -> WordList:
    """Word list for a language id (case-sensitive)."""
    try:
        return LANGUAGE_WORDS[language_id]
    except KeyError:
        raise UnknownLanguageError(language_id) from None
