"""
Inline rule table and the rewriter that applies it to a line.

Every rule is tried once per line, in table order. A rule either rewrites
the line, records a notice, or hands all of its matches to a handler.
Rewrites take effect immediately, so later rules see the rewritten line.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from ..models import ConversionContext
from .links import LinkTranslator


# Number of "=" signs -> number of "#" signs. More "=" means a bigger heading.
HEADING_LEVELS = {equals: 7 - equals for equals in range(1, 7)}


@dataclass(frozen=True)
class Rewrite:
    """Substitute every match with a ``re`` replacement template."""
    template: str


@dataclass(frozen=True)
class EmitNotice:
    """Record a diagnostic when the pattern matches; leave the line alone."""
    message: str


class HandlerId(Enum):
    LINK = "link"


@dataclass(frozen=True)
class Delegate:
    """Pass every match of the pattern to a handler that rewrites the line."""
    handler: HandlerId


Action = Union[Rewrite, EmitNotice, Delegate]


@dataclass(frozen=True)
class Rule:
    pattern: re.Pattern
    action: Action


def _heading_rules() -> list[Rule]:
    rules = []
    for equals, hashes in HEADING_LEVELS.items():
        marks = "=" * equals
        template = "#" * hashes + r" \1"
        # closed form "== text ==", then open form "==text" with any trailing "=" run
        rules.append(Rule(re.compile(rf"^{marks} (.*) {marks}$"), Rewrite(template)))
        rules.append(Rule(re.compile(rf"^{marks}([^=]*)=*$"), Rewrite(template)))
    return rules


INLINE_RULES: tuple[Rule, ...] = (
    *_heading_rules(),

    # Links, most specific first
    Rule(re.compile(r"\[\[.*?\|\{\{.*?\}\}\]\]"),
         EmitNotice("Link with image seen, not handled properly")),
    Rule(re.compile(r"\[\[.*?#.*?\|.*?\]\]"),
         EmitNotice("Link with segment seen, not handled properly")),
    Rule(re.compile(r"\[\[.*?>.*?\]\]"),
         EmitNotice("interwiki syntax seen, not handled properly")),
    Rule(re.compile(r"\[\[.*?\]\]"), Delegate(HandlerId.LINK)),

    # Inline code
    Rule(re.compile(r"<code>(.*?)</code>"), Rewrite(r"`\1`")),
    Rule(re.compile(r"<code (.*?)>(.*?)</code>"), Rewrite(r"`\2`{\1}")),

    # Misc checks
    Rule(re.compile(r"^\d+\.\s"),
         EmitNotice("Possible numbered list item that is not docuwiki format, not handled")),
    Rule(re.compile(r"^=+\s*.*$"),
         EmitNotice("Line starts with an =. Possibly an untranslated heading. "
                    "Check for = in the heading text")),
)


class InlineRewriter:
    """Applies an ordered rule table to single lines of text."""

    def __init__(self, rules: tuple[Rule, ...] = INLINE_RULES, link_translator: LinkTranslator = None):
        self.rules = rules
        link_translator = link_translator or LinkTranslator()
        self.handlers: dict[HandlerId, Callable[[str, list[str], ConversionContext], str]] = {
            HandlerId.LINK: link_translator.handle_link,
        }

    def apply(self, line: str, context: ConversionContext) -> str:
        """
        Run every rule against ``line``.

        Args:
            line: A single line, without its terminator.
            context: Conversion state that collects notices.

        Returns:
            The rewritten line.
        """
        for rule in self.rules:
            action = rule.action
            if isinstance(action, Rewrite):
                line = rule.pattern.sub(action.template, line)
            elif isinstance(action, EmitNotice):
                if rule.pattern.search(line):
                    context.notice(action.message)
            elif isinstance(action, Delegate):
                matches = [m.group(0) for m in rule.pattern.finditer(line)]
                if matches:
                    line = self.handlers[action.handler](line, matches, context)
        return line
