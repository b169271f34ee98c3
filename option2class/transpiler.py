"""
Main transpiler class that orchestrates the conversion process.
"""

import os
import sys
import time
from dataclasses import dataclass, field, replace
from typing import List, Optional

from .config import TranspilerConfig, load_config
from .generator import ClassGenerator
from .parser import ParserInterface, ScriptParser, extract_script_block
from .transformer import OptionTransformer
from .utils.diagnostics import Diagnostic, Diagnostics
from .utils.exceptions import ParseError, TranspileError, UnsupportedLanguageError
from .utils.file_utils import read_file, unique_file_path, write_file
from .utils.logger import get_logger, set_log_level

logger = get_logger(__name__)

SCRIPT_LANGS = ("js", "ts")
CLASS_COMPONENT_LANGS = ("jsx", "tsx")

# shown when a file is skipped for a parse error
PARSE_LIMITS = (
    "The script parser (esprima) reads ECMAScript 2017 with JSX: optional chaining (?.), "
    "nullish coalescing (??) and TypeScript type syntax are not supported"
)

# ---------------------------
# Clean AST Pretty Printer
# ---------------------------

SKIP_KEYS = {"range", "loc", "comments", "tokens", "raw", "errors"}
INDENT = "   "


def print_ast_tree(node, indent=0):
    """Pretty-print only meaningful AST structure (clean, readable)."""

    # LIST → print each item
    if isinstance(node, list):
        for n in node:
            print_ast_tree(n, indent)
        return

    # DICT → AST node
    if isinstance(node, dict):

        node_type = node.get("type")
        if not node_type:
            return

        # labels for better readability
        label = ""

        if node_type == "Identifier":
            label = f" ({node.get('name')})"

        if node_type == "Literal":
            label = f" ({node.get('raw')})"

        if node_type == "Property":
            key = node.get("key") or {}
            label = f" {key.get('name') or key.get('raw') or '[computed]'}"
            if node.get("method"):
                label += " [method]"
            elif node.get("kind") in ("get", "set"):
                label += f" [{node['kind']}]"

        print(f"{INDENT * indent}- {node_type}{label}")

        # Recurse into children nodes
        for key, value in node.items():
            if key in SKIP_KEYS or key == "type":
                continue
            print_ast_tree(value, indent + 1)


@dataclass
class ConversionResult:
    code: str
    # False when the script was passed through unchanged
    converted: bool
    diagnostics: List[Diagnostic] = field(default_factory=list)


# ---------------------------
# Transpiler Class
# ---------------------------

class Transpiler:
    """Converts Vue option API components into class API components."""

    def __init__(self, parser: Optional[ParserInterface] = None, config: Optional[TranspilerConfig] = None):
        """
        Initialize the transpiler.

        Args:
            parser: Parser instance to use. Defaults to ScriptParser.
            config: Configuration. Defaults to TranspilerConfig().
        """
        self.config = config or TranspilerConfig()
        self.parser = parser or ScriptParser()
        self.transformer = OptionTransformer(keep_unsupported_options=self.config.keep_unsupported_options)
        self.generator = ClassGenerator(default_component_name=self.config.default_component_name)
        self.dump_ast = False

    def convert(self, source: str, file_uri: str = "") -> ConversionResult:
        """
        Convert one component script. Pure: no file access.

        Raises:
            ParseError: if the script cannot be parsed
        """
        ast = self.parser.parse(source)
        if self.dump_ast:
            print("\n=== AST STRUCTURE ===")
            print_ast_tree(ast["body"])
            print("=== END AST STRUCTURE ===\n")

        diagnostics = Diagnostics()
        component = self.transformer.transform(ast, source, file_uri, diagnostics)
        code = self.generator.generate(ast, source, component, file_uri)
        return ConversionResult(
            code=code,
            converted=component.is_conversion_required,
            diagnostics=list(diagnostics),
        )

    def transpile(self, input_path: str) -> Optional[str]:
        """
        Convert the script block of a `.vue` file into a sibling class
        component file.

        Returns:
            Path of the written file, or None if there was nothing to write
        """
        logger.info(f"Starting option api to class api conversion of {input_path}")
        started = time.perf_counter()

        content = read_file(input_path)
        if content is None:
            raise TranspileError(f"Could not read file: {input_path}")

        block = extract_script_block(content)
        if block is None or not block.content.strip():
            logger.info(f"No script block in {input_path}")
            return None

        if block.lang in SCRIPT_LANGS:
            new_code = self.convert(block.content, input_path).code
        elif block.lang in CLASS_COMPONENT_LANGS:
            # already a class component, it only moves to the new file
            new_code = block.content
        else:
            raise UnsupportedLanguageError(f"Unsupported script lang: {block.lang}")

        new_code = new_code.lstrip()
        output_path = None
        if new_code:
            base_name = os.path.splitext(os.path.basename(input_path))[0]
            output_path = unique_file_path(
                os.path.dirname(os.path.abspath(input_path)),
                base_name,
                self.config.output_extension,
            )
            if not write_file(output_path, new_code):
                raise TranspileError(f"Could not write file: {output_path}")

        elapsed = (time.perf_counter() - started) * 1000
        logger.info(f"Converted {input_path} in {elapsed:.1f}ms")
        return output_path


def convert_script(source: str, file_uri: str = "", config: Optional[TranspilerConfig] = None) -> ConversionResult:
    """Convert an option API script snippet to class API source."""
    return Transpiler(config=config).convert(source, file_uri)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Convert Vue option API components to class API components")
    parser.add_argument("files", nargs="+", help="Vue single-file components to convert")
    parser.add_argument("-c", "--config", help="JSON configuration file")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument(
        "--drop-unsupported",
        action="store_true",
        help="Drop unsupported options instead of keeping them in @Component({...})",
    )
    parser.add_argument("--dump-ast", action="store_true", help="Print the parsed script AST")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except TranspileError as e:
        logger.error(str(e))
        return 1

    if args.drop_unsupported:
        config = replace(config, keep_unsupported_options=False)
    if not set_log_level(args.log_level or config.log_level):
        logger.warning(f"Unknown log level: {args.log_level or config.log_level}")

    transpiler = Transpiler(config=config)
    transpiler.dump_ast = args.dump_ast

    failed = 0
    for path in args.files:
        try:
            output = transpiler.transpile(path)
            if output:
                print(f"  {path} -> {output}")
        except ParseError as e:
            logger.error(f"Skipped {path}, its script could not be parsed: {e}. {PARSE_LIMITS}")
            failed += 1
        except TranspileError as e:
            logger.error(f"Transpilation of {path} failed: {e}")
            failed += 1

    logger.info("Option api to class api conversion finished")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
