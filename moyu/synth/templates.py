"""Template tables for the fake code generator.

Each table is a fixed tuple of snippets. Statement patterns carry two slots,
`{primary}` and `{secondary}`; a pattern whose secondary slot is optional
declares the token used when a line has only one ideograph.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class StatementPattern:
    """A statement template and the fallback for its secondary slot."""

    template: str
    fallback: Optional[str] = None

    def render(self, primary: str, secondary: Optional[str]) -> str:
        return self.template.format(primary=primary, secondary=secondary or self.fallback or "")


@dataclass(frozen=True)
class TemplateTables:
    """The four snippet tables used to dress up a document."""

    class_openings: Tuple[str, ...]
    method_prefixes: Tuple[str, ...]
    fields: Tuple[str, ...]
    statements: Tuple[StatementPattern, ...]

    @staticmethod
    def pick(rng: random.Random, table: Sequence):
        """Pick one entry uniformly at random."""
        return table[rng.randrange(len(table))]


DEFAULT_TEMPLATES = TemplateTables(
    class_openings=(
        "class DataProcessor {",
        "export class ServiceHandler {",
        "class AsyncManager implements IManager {",
        "export default class Controller {",
    ),
    method_prefixes=(
        "private async process",
        "public static handle",
        "protected async fetch",
        "private static async load",
    ),
    fields=(
        "private readonly data",
        "protected static config",
        "private async handler",
        "public static readonly instance",
    ),
    statements=(
        StatementPattern("const {primary}Data = await this.process{secondary}();", "Default"),
        StatementPattern("if (this.validate{primary}()) {{ await this.handle{secondary}(); }}", "Data"),
        StatementPattern("result.data.{primary} = await this.transform{secondary}();", "Content"),
        StatementPattern("this.logger.info('Processing {primary}:', {{ status: true }});"),
        StatementPattern("await this.emit('{primary}Changed', result.data);"),
    ),
)

FILE_HEADER = (
    "/**\n"
    " * @file Auto generated service handler\n"
    " * @author System Generator\n"
    " */\n"
    "\n"
)

IMPORT_LINES = (
    "import { IManager, IProcessor } from './interfaces';",
    "import { Logger } from './utils';",
)

NOOP_STATEMENT = "continue;"
RESULT_INIT = "const result = { status: true, data: {} };"
RETURN_STATEMENT = "return result;"
METHOD_NAME_SUFFIX = "Data"
