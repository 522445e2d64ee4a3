"""String parsing problems: coordinates, boolean expressions and simple matching."""


def _placements(digits):
    """Yield every valid way to write the digits as a number, with at most one point."""
    if digits[0] != "0" or digits == "0":
        yield digits
    if digits[-1] == "0":
        return
    if digits[0] == "0":
        if len(digits) > 1:
            yield f"0.{digits[1:]}"
        return
    for point in range(1, len(digits)):
        yield f"{digits[:point]}.{digits[point:]}"


def ambiguous_coordinates(s):
    """Return every coordinate "(x, y)" whose digits, stripped of punctuation, give s."""
    digits = s[1:-1]
    result = []
    for split in range(1, len(digits)):
        lefts = list(_placements(digits[:split]))
        if not lefts:
            continue
        rights = list(_placements(digits[split:]))
        result.extend(f"({x}, {y})" for x in lefts for y in rights)
    return result


def parse_bool_expr(expression):
    """Evaluate a boolean expression built from t, f, !(...), &(...) and |(...)."""
    stack = []
    try:
        for char in expression:
            if char == ",":
                continue
            if char != ")":
                stack.append(char)
                continue
            values = []
            while stack[-1] != "(":
                values.append(stack.pop())
            stack.pop()
            op = stack.pop()
            if op == "!":
                result = values.count("f") == 1
            elif op == "&":
                result = "f" not in values
            elif op == "|":
                result = "t" in values
            else:
                raise ValueError(f"unknown operator {op!r}")
            stack.append("t" if result else "f")
        return stack[-1] == "t"
    except IndexError:
        raise ValueError(f"malformed expression {expression!r}") from None


def array_strings_are_equal(word1, word2):
    """Return whether the two lists of strings concatenate to the same string."""
    return "".join(word1) == "".join(word2)


def max_repeating(sequence, word):
    """Return the largest k such that word repeated k times occurs in sequence."""
    if not word:
        raise ValueError("word must not be empty")
    count = 0
    while word * (count + 1) in sequence:
        count += 1
    return count


def interpret(command):
    """Decode a command made of "G", "()" and "(al)" tokens."""
    return command.replace("()", "o").replace("(al)", "al")


def count_consistent_strings(allowed, words):
    """Count the words that use only characters from allowed."""
    allowed_chars = set(allowed)
    return sum(set(word) <= allowed_chars for word in words)