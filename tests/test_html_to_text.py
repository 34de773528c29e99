from notifications.text import html_to_text


def test_rows_stay_on_their_own_lines():
    html = """
    <table>
      <tr><th>Task</th><th>Author</th></tr>
      <tr><td>Write report</td><td>Alice</td></tr>
      <tr><td>Review  budget</td><td>Bob</td></tr>
    </table>
    """
    assert html_to_text(html) == "Task | Author\nWrite report | Alice\nReview budget | Bob"


def test_nested_layout_tables_keep_inner_rows():
    html = """
    <table><tr><td>
      <h2>Alpha</h2>
      <table>
        <tr><td>First</td></tr>
        <tr><td>Second</td><td>Bob</td></tr>
      </table>
    </td></tr></table>
    """
    assert html_to_text(html).splitlines() == ["Alpha", "First", "Second | Bob"]


def test_links_keep_their_target():
    html = '<p>Manage <a href="https://example.com/settings/mail">your settings</a></p>'
    text = html_to_text(html)
    assert "your settings [https://example.com/settings/mail]" in text


def test_bare_link():
    html = '<a href="https://example.com">https://example.com</a>'
    assert html_to_text(html) == "https://example.com"


def test_head_and_styles_are_dropped():
    html = """
    <html><head><title>Rapport</title><style>p { color: red; }</style></head>
    <body><p>Hello</p><script>alert(1)</script></body></html>
    """
    assert html_to_text(html) == "Hello"


def test_blank_lines_are_collapsed():
    html = "<p>One</p><br><br><br><p>Two</p>"
    text = html_to_text(html)
    assert "\n\n\n" not in text
    assert text.startswith("One")
    assert text.endswith("Two")
