from stylize import StyledSegment, plain_lines, stylize_wrapped_lines


def test_stylize_wrapped_lines_heading_and_inline_bold() -> None:
    lines = ["foo bar", "", "lorem ipsum dolor sit amet"]
    styled = stylize_wrapped_lines(lines, [0, 7, 21, 26])

    assert styled[0] == [("", False), ("foo bar", True)]
    assert styled[1] == []
    assert styled[2] == [("lorem ipsum ", False), ("dolor", True), (" sit amet", False)]


def test_segments_are_named() -> None:
    styled = stylize_wrapped_lines(["ab"], [1])

    assert styled[0] == [StyledSegment("a", False), StyledSegment("b", True)]
    assert styled[0][1].bold is True
    assert styled[0][1].text == "b"


def test_bold_does_not_carry_across_wrapped_line() -> None:
    # "`foo bar`" wrapped after "foo"
    styled = stylize_wrapped_lines(["foo", "bar"], [0, 7])

    assert styled[0] == [("", False), ("foo", True)]
    assert styled[1] == [("bar", False)]


def test_line_end_reset_leaves_pending_toggle_in_place() -> None:
    # "`foo bar` baz" wrapped after "foo": the closing toggle still flips
    styled = stylize_wrapped_lines(["foo", "bar baz"], [0, 7])

    assert styled[1] == [("bar", False), (" baz", True)]


def test_toggle_on_line_break_closes_span() -> None:
    # "`dolor` sit `x`" wrapped after "dolor"; the close lands on the break
    styled = stylize_wrapped_lines(["dolor", "sit x"], [0, 5, 10, 11])

    assert styled[0] == [("", False), ("dolor", True)]
    assert styled[1] == [("sit ", False), ("x", True)]


def test_segments_reproduce_wrapped_text() -> None:
    lines = ["alpha beta", "gamma", "", "delta epsilon"]
    styled = stylize_wrapped_lines(lines, [2, 8, 12, 25])

    assert "\n".join(plain_lines(styled)) == "\n".join(lines)


def test_no_toggles_gives_plain_lines() -> None:
    styled = stylize_wrapped_lines(["one", "two"], [])

    assert styled == [[("one", False)], [("two", False)]]
