"""
Java-specific throw extractor using Tree-sitter.

This module finds every `throw` statement in a Java syntax tree and turns it
into an ExceptionRecord:
  - `throw new Foo(a, b);` -> type `Foo`, text `(a, b)`
  - `throw e;` / `throw wrap(e);` -> dropped in strict mode, recorded with the
    unknown type and the verbatim expression text in inclusive mode

Java's Tree-sitter grammar reference:
  https://github.com/tree-sitter/tree-sitter-java/blob/master/grammar.js
"""

from dataclasses import dataclass, field
from typing import Callable

from tree_sitter import Node, Tree

from exception_audit.models.exception_record import ExceptionRecord

from .base_extractor import UNKNOWN_EXCEPTION_TYPE, ThrowExtractor, ThrowPolicy
from .exceptions import ThrowExtractionError

COMMENT_NODE_TYPES = frozenset({"comment", "line_comment", "block_comment"})


@dataclass
class _WalkContext:
    """State threaded through one tree walk."""
    content: bytes
    project_name: str
    file_name: str
    policy: ThrowPolicy
    records: list[ExceptionRecord] = field(default_factory=list)


class JavaThrowExtractor(ThrowExtractor):
    """Java-specific throw extractor.
    
    Tree-sitter node types used:
      - throw_statement: `throw <expression>;`
      - object_creation_expression: `new Type(args)`, with fields
        `type` and `arguments`
      - argument_list: `(a, b, c)`
      - type_identifier / scoped_type_identifier / generic_type: the
        constructed type, reduced to its simple name
    """

    def __init__(self):
        self._handlers: dict[str, Callable[[Node, _WalkContext], None]] = {
            "throw_statement": self._visit_throw_statement,
        }
    
    @property
    def language(self) -> str:
        return "java"
    
    def extract_records(
        self,
        tree: Tree,
        file_content: bytes,
        project_name: str,
        file_name: str,
        policy: ThrowPolicy = ThrowPolicy.STRICT,
    ) -> list[ExceptionRecord]:
        """Walk the whole tree and collect one record per recorded throw site.
        
        The walk uses an explicit stack rather than recursion so deeply
        nested expressions cannot exhaust the interpreter stack. Children are
        pushed in reverse so nodes are visited in source order.

        Args:
            tree: The Tree-sitter syntax tree (from parsing)
            file_content: The bytes the tree was parsed from
            project_name: Owning project name
            file_name: Owning file name
            policy: Classification policy for non-construction throws
            
        Returns:
            List of ExceptionRecord objects in source order
            
        Raises:
            ThrowExtractionError: If the walk fails unexpectedly
        """
        context = _WalkContext(
            content=file_content,
            project_name=project_name,
            file_name=file_name,
            policy=ThrowPolicy(policy),
        )
        try:
            stack: list[Node] = [tree.root_node]
            while stack:
                node = stack.pop()
                handler = self._handlers.get(node.type)
                if handler is not None:
                    handler(node, context)
                stack.extend(reversed(node.children))
            return context.records

        except ThrowExtractionError:
            raise
        except Exception as e:
            raise ThrowExtractionError(
                f"Failed to extract Java throw sites: {e}",
                language="java",
                file_path=file_name,
            ) from e

    def _visit_throw_statement(self, node: Node, context: _WalkContext) -> None:
        thrown = self._thrown_expression(node)
        if thrown is None:
            return

        if thrown.type == "object_creation_expression":
            exception_type = self._constructed_type_name(thrown, context.content)
            exception_text = self._render_arguments(
                thrown.child_by_field_name("arguments"), context.content
            )
        elif context.policy is ThrowPolicy.INCLUSIVE:
            exception_type = UNKNOWN_EXCEPTION_TYPE
            exception_text = self._node_text(thrown, context.content)
        else:
            return

        context.records.append(ExceptionRecord(
            project_name=context.project_name,
            file_name=context.file_name,
            exception_type=exception_type,
            exception_text=exception_text,
            line_number=self._line_of(node),
        ))

    def _thrown_expression(self, node: Node) -> Node | None:
        for child in node.named_children:
            if child.type not in COMMENT_NODE_TYPES:
                return child
        return None

    def _constructed_type_name(self, creation: Node, content: bytes) -> str:
        """Reduce the `type` of a `new` expression to its simple class name.

        `java.io.IOException` becomes `IOException` and `Box<String>` becomes
        `Box`.
        """
        type_node = creation.child_by_field_name("type")
        while type_node is not None:
            if type_node.type == "generic_type":
                type_node = self._first_named(type_node, exclude={"type_arguments"})
            elif type_node.type == "scoped_type_identifier":
                type_node = self._last_named(type_node, include={"type_identifier"})
            else:
                break

        if type_node is None:
            return UNKNOWN_EXCEPTION_TYPE
        return self._node_text(type_node, content)

    def _render_arguments(self, arguments: Node | None, content: bytes) -> str:
        """Render an argument list as `()` or `(arg1, arg2, ...)`.

        Each argument keeps its source text verbatim; comments between
        arguments are dropped.
        """
        if arguments is None:
            return "()"
        rendered = [
            self._node_text(argument, content)
            for argument in arguments.named_children
            if argument.type not in COMMENT_NODE_TYPES
        ]
        if not rendered:
            return "()"
        return "(" + ", ".join(rendered) + ")"

    @staticmethod
    def _first_named(node: Node, exclude: set[str]) -> Node | None:
        for child in node.named_children:
            if child.type not in exclude and child.type not in COMMENT_NODE_TYPES:
                return child
        return None

    @staticmethod
    def _last_named(node: Node, include: set[str]) -> Node | None:
        for child in reversed(node.named_children):
            if child.type in include:
                return child
        return None
