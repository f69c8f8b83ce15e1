# copager

copager is a small, composable toolkit for building language front ends.
A language is declared once, as a set of tokens and a set of grammar rules,
and then processed by independent pieces:

- a **lexer**, which turns source text into tokens,
- a **parser**, which turns tokens into read / reduce events,
- an **IR builder**, which turns those events into a result.

Each piece can be swapped without touching the others.

## Installation

```
pip install copager
```

To run the test suite:

```
pip install "copager[test]"
pytest
```

## Describing a language

```python
from copager.token import TokenSet, token
from copager.rule import RuleSet, rules, uses_tokens
from copager.lang import Lang
from copager.regex_lexer import RegexLexer

class ExprToken(TokenSet):
    Plus = token(r"\+")
    Num = token(r"[1-9][0-9]*")
    Space = token(r"[ \t\n]+", options=["trivia"])

@uses_tokens(ExprToken)
class ExprRule(RuleSet):
    Expr = rules("<expr> ::= <expr> Plus Num", "<expr> ::= Num")

lang = Lang(ExprToken, ExprRule)
[t.as_str() for t in RegexLexer(lang).run("1 + 2")]   # ['1', '+', '2']
```

### Tokens — `copager.token`

A token set is a `TokenSet` enumeration whose members are made with
`token(*patterns, options=...)`. Each pattern is a regular-expression
alternative; `options` is a list of flags (a single string is accepted too):

| option        | meaning                                                              |
|---------------|----------------------------------------------------------------------|
| `pre_trivia`  | skipped before each token                                            |
| `trivia`      | skipped before each token when no kind has `pre_trivia`              |
| `post_trivia` | skipped after each token; a final newline of the match is left over  |
| `ir_omit`     | the token is read but left out of trees built by `RawIRBuilder`      |

Members answer `as_str_list()` (their patterns) and `as_option_list()`
(their options). Lexed tokens are `Token` objects with `kind`, `src`,
`body` and `full` spans; `as_str()` returns the text without trivia and
`as_full_str()` the text including the skipped trivia, so when the whole
input is lexed, joining `as_full_str()` over all tokens gives the input back.

### Rules — `copager.rule`

A rule set is a `RuleSet` enumeration decorated with
`uses_tokens(<TokenSet>)`; each member gets its productions from
`rules(...)`, written in BNF:

```
<expr> ::= <expr> Plus <term>
<expr> ::= <term>
<list> ::=
```

`<name>` is a non-terminal, a bare identifier names a member of the token
set, and an empty right side means ε. All rules are read when the class is
defined; malformed text or an unknown token name raises `BnfError`, whose
message points at the column. `parse_bnf(src, tokenset)` returns the
`(lhs, rhs)` of a single rule.

Grammar symbols are `NonTerm`, `Term`, `Epsilon` and `Eof`. A `Rule` holds
`tag`, `lhs`, `rhs` and `id` (equality and hashing ignore `id`) and offers
`nonterms()` and `terms()`. `RuleSet.as_rules()` returns the rules of one
member (a member without rules raises `ValueError`), and
`RuleSet.into_ruleset()` numbers every rule by the position of its member
and collects them into a `RuleSetData`. Its start symbol `top` is the left
side of the first rule; it offers `nonterms()`, `terms()`,
`find_rule(target)`, `update_top(rule)` and `RuleSetData.from_rules(rules)`.

### The language — `copager.lang`

`Lang(token_set, rule_set)` pairs the two; it raises `TypeError` if the
rule set was not declared over that token set. `Lang.ruleset()` returns the
`RuleSetData`.

## Grammar analysis

Built from a `RuleSetData`:

- `copager.first.FirstSet` — `get(elem)` for one symbol and `get_by(elems)`
  for a sequence (`Eof` stands for a sequence that can be empty),
- `copager.follow.FollowSet` — `get(name)` for a non-terminal's name,
- `copager.director.DirectorSet` — `get(rule)`, the lookahead symbols that
  select a rule.

`get` returns `None` for unknown keys.

## Lexing — `copager.regex_lexer`

`RegexLexer(lang)` compiles the patterns of a language's token set. Its
`run(text)` is a generator of `Token` objects; kinds are tried in
declaration order, and lexing stops quietly at the first position no kind
matches. Other lexers subclass `BaseLexer` and implement `run`.

## Parsing — `copager.parse`

A parser subclasses `BaseParser` and implements `run(tokens)`, yielding
`Read(token)` when a token is shifted and `Parse(rule, length)` when the
last `length` items are reduced by the rule tagged `rule`. It raises
`ParseFailure` (carrying an optional `token`) when the input is rejected.

## Building results — IR builders

An IR builder subclasses `IRBuilder` (`on_read`, `on_parse`, `build`).

- `copager.void` — `VoidBuilder` ignores all events and builds `Void()`.
- `copager.ir` — `RawIRBuilder(convert)` stacks `RawAtom` / `RawList`
  nodes, drops `ir_omit` tokens from reductions and passes the single root
  to `convert`; a bad reduction length or a stack that does not end with
  exactly one tree raises `ValueError`.
- `copager.sexp` — `sexp_builder()` yields `SExpAtom` / `SExpList` values
  that print as S-expressions, e.g. `(Expr (Term (Num "1")))`;
  `from_raw(raw)` converts a raw tree directly.
- `copager.tree` — `cstree_builder()` yields a tree of `Leaf(tag, text)` and
  `Node(tag, children)`. `CSTreeWalker(tree)` consumes it from the front:
  `len()`, `peek()` returning `(token_tag, rule_tag)`, `expect_leaf()`
  returning `(tag, text)`, `expect_node(factory)` and
  `expect_nodes(factory)`, which flattens a left-recursive list rule into a
  Python list. Running out of elements raises `IndexError`; a node where a
  leaf is expected raises `ValueError`.

## Putting it together — `copager.processor`

`Generator(lang, lexer, parser)` takes the language and two callables that
build a lexer and a parser from it. `Processor(generator)` is built with
`build()` (or `build_lexer()` and `build_parser()`), each returning the
processor, and `process(text, builder)` runs the text through both and
returns what a fresh `builder()` builds. Calling `process` before building
raises `RuntimeError`; a `ParseFailure` from the parser passes through.

## What is not included

The package ships no concrete parser: there is no LR, SLR or LALR table
construction. `BaseParser` must be implemented to run `Processor.process`.
There is also no way to save a built lexer or parser and restore it later,
and no command-line tool.