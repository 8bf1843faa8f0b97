"""Quickstart example for combparse.

This example demonstrates evaluating arithmetic with the bundled expression
grammar, handling rejected input, and inspecting a prepared grammar.
"""

from combparse import (
    DepthLimitExceededError,
    ParseFailedError,
    ParserConfig,
    build_expression_parser,
    evaluate,
    random_expression,
)

# Example 1: One-off evaluation
print("=" * 50)
print("Example 1: One-off Evaluation")
print("=" * 50)

print(evaluate("1+2*3"))
# Output: 7

print(evaluate("(1+2)*3"))
# Output: 9

# Example 2: Reusing a prepared parser
print("\n" + "=" * 50)
print("Example 2: Reusing a Prepared Parser")
print("=" * 50)

parser = build_expression_parser()
print(f"Grammar has {parser.node_count} parser nodes after compression")

for source in ["9", "2*(3+4)", "9*9*9*9*9*9"]:
    print(f"{source} = {parser.parse(source)}")
# Output: products and sums wrap modulo 0xFFFF

# Example 3: Rejected input
print("\n" + "=" * 50)
print("Example 3: Rejected Input")
print("=" * 50)

print(parser.try_parse("1+"))
# Output: None

try:
    parser.parse("(1")
except ParseFailedError as e:
    print(e)
# Output: error[INPUT_NOT_MATCHED]: Input does not match the grammar

# Example 4: Depth limit
print("\n" + "=" * 50)
print("Example 4: Depth Limit")
print("=" * 50)

shallow = build_expression_parser(ParserConfig(max_depth=50))
try:
    shallow.parse("(" * 20 + "1" + ")" * 20)
except DepthLimitExceededError as e:
    print(e.diagnostic.code.name if e.diagnostic else e)
# Output: MAX_DEPTH_EXCEEDED

# Example 5: Generated input
print("\n" + "=" * 50)
print("Example 5: Generated Input")
print("=" * 50)

source = random_expression(20)
print(f"{len(source)} characters, value {parser.parse(source)}")
# Output: 41137 characters, value 31615
