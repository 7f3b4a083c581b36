"""sqlslot compilation layer: template + arguments → SQL text."""
from sqlslot.compile.base import CompiledQuery
from sqlslot.compile.builder import QueryBuilder
from sqlslot.compile.collapser import BlockCollapser
from sqlslot.compile.context import ArgumentCursor, CompilationContext
from sqlslot.compile.formatter import ValueFormatter
from sqlslot.compile.scanner import PlaceholderScanner

__all__ = [
    "CompiledQuery",
    "QueryBuilder",
    "BlockCollapser",
    "ArgumentCursor",
    "CompilationContext",
    "ValueFormatter",
    "PlaceholderScanner",
]
