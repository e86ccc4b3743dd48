"""
COOL Recursive Descent Parser

Backtracking recursive descent over a scannerless grammar. The structural
rules (program, class, feature, formal) only recognize their input; the
expression rules build an Expression tree.

Precedence is layered: expr (+, -) over term (*, /) over factor. The two
layers fold differently. expr folds left, so ``a - b - c`` is
``(a - b) - c``. term folds right over its reversed (factor, op) pairs, so
``8 / 4 / 2`` is ``8 / (4 / 2)``. ParserOptions.left_assoc_factors switches
term to a left fold.

Cursor discipline: rule methods raise ParseError and may leave the cursor
anywhere; whoever catches the error restores the cursor to the mark it
took. The module-level parse_* functions always report failure at the
position they started from.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..lexer.scanner import Scanner
from ..lexer.tokens import Token, RESERVED_WORDS, MAX_INTEGER
from ..options import ParserOptions, DEFAULT_OPTIONS
from .ast_nodes import (
    Expression, BinOp, Assign, If, While, New, IsVoid, Neg, Not,
    Variable, Number, Boolean, BinaryExpr
)
from .errors import (
    ParseError, create_unexpected_input_error, create_integer_overflow_error,
    create_trailing_input_error, create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)


# ============================================================================
# Results
# ============================================================================

@dataclass(frozen=True)
class Success:
    """A rule matched. ``pos`` is the offset just past its span."""
    value: Any
    pos: int

    def __bool__(self) -> bool:
        return True

    def is_successful(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A rule did not match. ``pos`` is where it was tried."""
    pos: int
    error: ParseError

    def __bool__(self) -> bool:
        return False

    def is_successful(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


ParseResult = Union[Success, Failure]


# ============================================================================
# Folds
# ============================================================================

def fold_left(head: Expression, rest: Sequence[Tuple[BinOp, Expression]]) -> Expression:
    """Fold ``head (op operand)*`` into a left-nested BinaryExpr chain."""
    accumulator = head
    for op, operand in rest:
        accumulator = BinaryExpr(op, accumulator, operand)
    return accumulator


def fold_right(front: Sequence[Tuple[Expression, BinOp]], last: Expression) -> Expression:
    """
    Fold ``(operand op)* last`` starting from ``last``.

    Pairs are consumed from the last captured to the first, each wrapping
    the accumulator as its right operand.
    """
    accumulator = last
    for operand, op in reversed(front):
        accumulator = BinaryExpr(op, operand, accumulator)
    return accumulator


def _fold_pairs_left(front: Sequence[Tuple[Expression, BinOp]], last: Expression) -> Expression:
    operands = [operand for operand, _ in front] + [last]
    ops = [op for _, op in front]
    return fold_left(operands[0], list(zip(ops, operands[1:])))


# ============================================================================
# Parser
# ============================================================================

class Parser:
    """
    COOL recursive descent parser.

    A parser instance covers one parse of one input. Every public
    ``parse_*`` method matches its rule at the current cursor and raises
    ParseError when the input does not match.
    """

    TERM_OPERATORS = {"+": BinOp.ADD, "-": BinOp.SUB}
    FACTOR_OPERATORS = {"*": BinOp.MUL, "/": BinOp.DIV}

    def __init__(self, source: str, pos: int = 0, options: Optional[ParserOptions] = None):
        """
        Initialize parser over source text.

        Args:
            source: COOL source text
            pos: Offset at which parsing starts
            options: Parser configuration (defaults to ParserOptions())
        """
        self.options = options or DEFAULT_OPTIONS
        self.scanner = Scanner(source, self.options.filename, pos)

        # Ordered choice for factor; each alternative returns None without
        # consuming input when its leading terminal does not match.
        self._factor_alternatives: List[Callable[[], Optional[Expression]]] = [
            self._parse_assignment,
            self._parse_if,
            self._parse_while,
            self._parse_new,
            self._parse_isvoid,
            self._parse_negation,
            self._parse_not,
            self._parse_number,
            self._parse_boolean,
            self._parse_grouping,
            self._parse_variable,
        ]

    # ------------------------------------------------------------------
    # Structural grammar (recognition only)
    # ------------------------------------------------------------------

    def parse_program(self) -> None:
        """program = spacing (class ';')+"""
        self.scanner.skip_spacing()
        self.parse_class()
        self._symbol(";")

        while True:
            mark = self.scanner.mark()
            try:
                self.parse_class()
                self._symbol(";")
            except ParseError:
                self.scanner.reset(mark)
                break

    def parse_class(self) -> None:
        """class = 'class' TYPE ['inherits' TYPE] '{' (feature ';')* '}'"""
        self._keyword("class")
        self._type_name()

        mark = self.scanner.mark()
        if self.scanner.match_keyword("inherits"):
            if self.scanner.match_type_name() is None:
                self.scanner.reset(mark)

        self._symbol("{")
        while True:
            mark = self.scanner.mark()
            try:
                self.parse_feature()
                self._symbol(";")
            except ParseError:
                self.scanner.reset(mark)
                break
        self._symbol("}")

    def parse_feature(self) -> None:
        """
        feature = ID '(' [formal (',' formal)*] ')' ':' TYPE '{' expr '}'
                / ID ':' TYPE ['<-' expr]

        The '(' after the name selects the method form.
        """
        self._identifier()

        if self.scanner.match_symbol("("):
            self._parse_formal_list()
            self._symbol(")")
            self._symbol(":")
            self._type_name()
            self._symbol("{")
            self.parse_expression()
            self._symbol("}")
            return

        self._symbol(":")
        self._type_name()

        mark = self.scanner.mark()
        if self.scanner.match_symbol("<-"):
            try:
                self.parse_expression()
            except ParseError:
                self.scanner.reset(mark)

    def parse_formal(self) -> None:
        """formal = ID ':' TYPE"""
        self._identifier()
        self._symbol(":")
        self._type_name()

    def _parse_formal_list(self):
        """Optional comma-separated formals; stops before anything that does not fit."""
        mark = self.scanner.mark()
        try:
            self.parse_formal()
        except ParseError:
            self.scanner.reset(mark)
            return

        while True:
            mark = self.scanner.mark()
            if self.scanner.match_symbol(",") is None:
                return
            try:
                self.parse_formal()
            except ParseError:
                self.scanner.reset(mark)
                return

    # ------------------------------------------------------------------
    # Expression grammar
    # ------------------------------------------------------------------

    def parse_expression(self) -> Expression:
        """expr = term (term_op term)*, folded left."""
        head = self.parse_term()
        rest: List[Tuple[BinOp, Expression]] = []

        while True:
            mark = self.scanner.mark()
            op = self._operator(self.TERM_OPERATORS)
            if op is None:
                break
            try:
                operand = self.parse_term()
            except ParseError:
                self.scanner.reset(mark)
                break
            rest.append((op, operand))

        return fold_left(head, rest)

    def parse_term(self) -> Expression:
        """term = (factor factor_op)* factor, folded right over the reversed pairs."""
        front: List[Tuple[Expression, BinOp]] = []
        operand = self.parse_factor()

        while True:
            op = self._operator(self.FACTOR_OPERATORS)
            if op is None:
                break
            front.append((operand, op))
            operand = self.parse_factor()

        if self.options.left_assoc_factors:
            return _fold_pairs_left(front, operand)
        return fold_right(front, operand)

    def parse_factor(self) -> Expression:
        """Try each factor alternative in order; the first whose prefix matches wins."""
        for alternative in self._factor_alternatives:
            node = alternative()
            if node is not None:
                return node
        raise self.furthest_error()

    def _parse_assignment(self) -> Optional[Expression]:
        mark = self.scanner.mark()
        name = self.scanner.match_identifier()
        if name is None:
            return None
        if self.scanner.match_symbol("<-") is None:
            self.scanner.reset(mark)
            return None
        return Assign(name.value, self.parse_expression())

    def _parse_if(self) -> Optional[Expression]:
        if self.scanner.match_keyword("if") is None:
            return None
        cond = self.parse_expression()
        self._keyword("then")
        then_branch = self.parse_expression()
        self._keyword("else")
        else_branch = self.parse_expression()
        self._keyword("fi")
        return If(cond, then_branch, else_branch)

    def _parse_while(self) -> Optional[Expression]:
        if self.scanner.match_keyword("while") is None:
            return None
        cond = self.parse_expression()
        self._keyword("loop")
        body = self.parse_expression()
        self._keyword("pool")
        return While(cond, body)

    def _parse_new(self) -> Optional[Expression]:
        if self.scanner.match_keyword("new") is None:
            return None
        return New(self._type_name().value)

    def _parse_isvoid(self) -> Optional[Expression]:
        if self.scanner.match_keyword("isvoid") is None:
            return None
        return IsVoid(self.parse_expression())

    def _parse_negation(self) -> Optional[Expression]:
        if self.scanner.match_symbol("~") is None:
            return None
        return Neg(self.parse_expression())

    def _parse_not(self) -> Optional[Expression]:
        if self.scanner.match_keyword("not") is None:
            return None
        return Not(self.parse_expression())

    def _parse_number(self) -> Optional[Expression]:
        token = self.scanner.match_integer()
        if token is None:
            return None
        return Number(token.value)

    def _parse_boolean(self) -> Optional[Expression]:
        if self.scanner.match_keyword("true"):
            return Boolean(True)
        if self.scanner.match_keyword("false"):
            return Boolean(False)
        return None

    def _parse_grouping(self) -> Optional[Expression]:
        if self.scanner.match_symbol("(") is None:
            return None
        inner = self.parse_expression()
        self._symbol(")")
        return inner

    def _parse_variable(self) -> Optional[Expression]:
        if not self.options.allow_variables:
            return None
        mark = self.scanner.mark()
        name = self.scanner.match_identifier()
        if name is None:
            return None
        if name.value in RESERVED_WORDS:
            self.scanner.reset(mark)
            return None
        return Variable(name.value)

    # ------------------------------------------------------------------
    # Terminal helpers
    # ------------------------------------------------------------------

    def _operator(self, operators: Dict[str, BinOp]) -> Optional[BinOp]:
        for symbol, op in operators.items():
            if self.scanner.match_symbol(symbol):
                return op
        return None

    def _keyword(self, word: str) -> Token:
        token = self.scanner.match_keyword(word)
        if token is None:
            raise self.furthest_error()
        return token

    def _symbol(self, text: str) -> Token:
        token = self.scanner.match_symbol(text)
        if token is None:
            raise self.furthest_error()
        return token

    def _identifier(self) -> Token:
        token = self.scanner.match_identifier()
        if token is None:
            raise self.furthest_error()
        return token

    def _type_name(self) -> Token:
        token = self.scanner.match_type_name()
        if token is None:
            raise self.furthest_error()
        return token

    def furthest_error(self) -> ParseError:
        """Build a ParseError describing the furthest failure seen so far."""
        scanner = self.scanner
        offset = max(scanner.furthest, scanner.pos)
        location = scanner.location(offset)

        if offset in scanner.overflow_offsets:
            return create_integer_overflow_error(scanner.digits_at(offset), location, MAX_INTEGER)

        found = scanner.word_at(offset) or scanner.source[offset:offset + 1]
        expected = list(scanner.expected) if offset == scanner.furthest else []
        return create_unexpected_input_error(expected, found, location)


# ============================================================================
# Entry points
# ============================================================================

RULES: Dict[str, Callable[[Parser], Any]] = {
    "program": Parser.parse_program,
    "class": Parser.parse_class,
    "feature": Parser.parse_feature,
    "formal": Parser.parse_formal,
    "expr": Parser.parse_expression,
    "term": Parser.parse_term,
    "factor": Parser.parse_factor,
}

EXPRESSION_RULES = frozenset({"expr", "term", "factor"})


def _rule(name: str) -> Callable[[Parser], Any]:
    try:
        return RULES[name]
    except KeyError:
        raise ValueError(f"unknown rule {name!r}; expected one of {', '.join(RULES)}") from None


def _run(rule_name: str, source: str, pos: int, options: Optional[ParserOptions]) -> ParseResult:
    rule = _rule(rule_name)
    parser = Parser(source, pos, options)
    logger.debug("parsing %s at offset %d of %d", rule_name, pos, len(source))

    try:
        value = rule(parser)
    except ParseError as error:
        logger.debug("%s failed at offset %d: %s", rule_name, pos, error.diagnostic.message)
        return Failure(pos, error)
    except RecursionError:
        logger.debug("%s exceeded the recursion limit", rule_name)
        return Failure(pos, create_nesting_too_deep_error(parser.scanner.location(pos)))

    logger.debug("%s matched offsets %d..%d", rule_name, pos, parser.scanner.pos)
    return Success(value, parser.scanner.pos)


def parse_program(source: str, pos: int = 0, options: Optional[ParserOptions] = None) -> ParseResult:
    return _run("program", source, pos, options)


def parse_class(source: str, pos: int = 0, options: Optional[ParserOptions] = None) -> ParseResult:
    return _run("class", source, pos, options)


def parse_feature(source: str, pos: int = 0, options: Optional[ParserOptions] = None) -> ParseResult:
    return _run("feature", source, pos, options)


def parse_formal(source: str, pos: int = 0, options: Optional[ParserOptions] = None) -> ParseResult:
    return _run("formal", source, pos, options)


def parse_expr(source: str, pos: int = 0, options: Optional[ParserOptions] = None) -> ParseResult:
    return _run("expr", source, pos, options)


def parse_term(source: str, pos: int = 0, options: Optional[ParserOptions] = None) -> ParseResult:
    return _run("term", source, pos, options)


def parse_factor(source: str, pos: int = 0, options: Optional[ParserOptions] = None) -> ParseResult:
    return _run("factor", source, pos, options)


def parse_source(source: str, rule: str = "program", options: Optional[ParserOptions] = None) -> Any:
    """
    Parse a complete input with the given rule.

    Leading and trailing spacing is allowed; anything else left over is an
    error.

    Returns:
        The rule's value (an Expression for expr/term/factor, else None)

    Raises:
        ParseError: If the input does not match or is not fully consumed
    """
    rule_method = _rule(rule)
    parser = Parser(source, 0, options)
    scanner = parser.scanner
    scanner.skip_spacing()
    logger.debug("parsing complete input as %s (%d chars)", rule, len(source))

    try:
        value = rule_method(parser)
    except RecursionError:
        raise create_nesting_too_deep_error(scanner.location(0)) from None

    scanner.skip_spacing()
    if not scanner.at_end():
        if scanner.furthest > scanner.pos:
            raise parser.furthest_error()
        found = scanner.word_at(scanner.pos) or scanner.peek()
        raise create_trailing_input_error(found, scanner.location())

    return value
