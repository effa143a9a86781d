"""JavaScript and TypeScript declaration scanner using tree-sitter.

Finds top-level functions, classes, class methods, and function-valued
constants, and records whether each one already carries a JSDoc block.
"""

import logging
from pathlib import Path
from typing import Optional

import tree_sitter
import tree_sitter_javascript as tsjs
import tree_sitter_typescript as tsts

from docs_generator.parsers.structure import (
    Declaration,
    DeclarationKind,
    Language,
    SourceScan,
)

logger = logging.getLogger(__name__)

_LANGUAGES = {
    Language.JAVASCRIPT: tree_sitter.Language(tsjs.language()),
    Language.TYPESCRIPT: tree_sitter.Language(tsts.language_typescript()),
    Language.TSX: tree_sitter.Language(tsts.language_tsx()),
}

_FUNC_TYPES = {
    "function_declaration",
    "generator_function_declaration",
}
_CLASS_TYPES = {
    "class_declaration",
    "abstract_class_declaration",
}
_VARIABLE_TYPES = {
    "lexical_declaration",
    "variable_declaration",
}
_FUNCTION_VALUE_TYPES = {
    "arrow_function",
    "function",
    "function_expression",
    "generator_function",
}


class SourceScanner:
    """Scans JS/TS sources for declarations and their JSDoc status."""

    def scan_file(self, file_path: str) -> SourceScan:
        """Scan a JavaScript or TypeScript file.

        Args:
            file_path: Path to the source file.

        Returns:
            A SourceScan listing every documentable declaration.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        source = path.read_text(encoding="utf-8")
        return self.scan_source(source, file_path, Language.from_path(path))

    def scan_source(
        self,
        source: str,
        file_path: str = "<string>",
        language: Language = Language.TYPESCRIPT,
    ) -> SourceScan:
        """Scan a source string.

        Args:
            source: JavaScript or TypeScript source code.
            file_path: File path for reference.
            language: Grammar to parse with.

        Returns:
            A SourceScan listing every documentable declaration.
        """
        parser = tree_sitter.Parser(_LANGUAGES[language])
        source_bytes = source.encode("utf-8")
        tree = parser.parse(source_bytes)

        scan = SourceScan(
            file_path=file_path,
            language=language,
            line_count=len(source.splitlines()),
        )

        for child in tree.root_node.children:
            if child.type == "export_statement":
                for inner in child.named_children:
                    self._process_node(inner, child, scan, source_bytes, True)
            else:
                self._process_node(child, child, scan, source_bytes, False)

        logger.debug(
            "Scanned %s: %d declarations, %d without JSDoc",
            file_path,
            len(scan.declarations),
            len(scan.undocumented),
        )
        return scan

    def _process_node(
        self,
        node: tree_sitter.Node,
        anchor: tree_sitter.Node,
        scan: SourceScan,
        source_bytes: bytes,
        exported: bool,
    ) -> None:
        """Record declarations held by a top-level node.

        Args:
            node: The declaration node.
            anchor: Node a JSDoc comment would precede (the export
                statement for exported declarations).
            scan: The SourceScan to populate.
            source_bytes: Source as bytes for text extraction.
            exported: Whether the node sits in an export statement.
        """
        if node.type in _FUNC_TYPES:
            name = self._name_of(node, source_bytes)
            if name:
                scan.declarations.append(
                    self._declaration(
                        name,
                        DeclarationKind.FUNCTION,
                        node,
                        anchor,
                        source_bytes,
                        exported,
                    )
                )

        elif node.type in _CLASS_TYPES:
            name = self._name_of(node, source_bytes)
            if not name:
                return
            scan.declarations.append(
                self._declaration(
                    name, DeclarationKind.CLASS, node, anchor, source_bytes, exported
                )
            )
            body = node.child_by_field_name("body")
            if body is not None:
                self._process_class_body(name, body, scan, source_bytes)

        elif node.type in _VARIABLE_TYPES:
            for decl in node.named_children:
                if decl.type != "variable_declarator":
                    continue
                value = decl.child_by_field_name("value")
                if value is None or value.type not in _FUNCTION_VALUE_TYPES:
                    continue
                name = self._name_of(decl, source_bytes)
                if name:
                    scan.declarations.append(
                        self._declaration(
                            name,
                            DeclarationKind.FUNCTION,
                            decl,
                            anchor,
                            source_bytes,
                            exported,
                        )
                    )

    def _process_class_body(
        self,
        class_name: str,
        body: tree_sitter.Node,
        scan: SourceScan,
        source_bytes: bytes,
    ) -> None:
        """Record the methods of a class body."""
        for member in body.named_children:
            if member.type != "method_definition":
                continue
            name = self._name_of(member, source_bytes)
            if name:
                scan.declarations.append(
                    self._declaration(
                        f"{class_name}.{name}",
                        DeclarationKind.METHOD,
                        member,
                        member,
                        source_bytes,
                        False,
                    )
                )

    def _declaration(
        self,
        name: str,
        kind: DeclarationKind,
        node: tree_sitter.Node,
        anchor: tree_sitter.Node,
        source_bytes: bytes,
        exported: bool,
    ) -> Declaration:
        return Declaration(
            name=name,
            kind=kind,
            line_number=node.start_point.row + 1,
            has_jsdoc=self._has_jsdoc(anchor, source_bytes),
            exported=exported,
        )

    def _has_jsdoc(self, node: tree_sitter.Node, source_bytes: bytes) -> bool:
        """Check for a /** ... */ comment immediately before a node."""
        prev = node.prev_named_sibling
        if prev is None or prev.type != "comment":
            return False
        return self._node_text(prev, source_bytes).startswith("/**")

    def _name_of(
        self, node: tree_sitter.Node, source_bytes: bytes
    ) -> Optional[str]:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        return self._node_text(name_node, source_bytes)

    def _node_text(self, node: tree_sitter.Node, source_bytes: bytes) -> str:
        return source_bytes[node.start_byte : node.end_byte].decode("utf-8")
