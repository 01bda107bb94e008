# Directory names whose contents are never scanned: build output and test sources
DEFAULT_EXCLUDED_SEGMENTS = frozenset({
    "target",
    "test",
})

DEFAULT_SOURCE_EXTENSION = ".java"
