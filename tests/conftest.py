"""
Shared fixtures: sample markup, model replies, and a substitute completion backend.
"""

import pytest

from analysis.sections import Section


class FakeCompletionClient:
    """Stands in for CompletionClient; records prompts and returns a canned reply."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def section_body(section):
    return f"{section.title} content line one.\nLine two for {section.key}."


@pytest.fixture
def full_reply():
    """A reply containing all ten labels in order, separated by blank lines."""
    return "\n\n".join(f"{s.label}:\n{section_body(s)}" for s in Section) + "\n"


@pytest.fixture
def sample_html():
    return """<!DOCTYPE html>
<html>
<head>
  <title>  Acme Widgets | Home </title>
  <meta name="Description" content="Hand-made widgets since 1999.">
  <style>body { color: red; }</style>
  <script>var tracking = "do not include";</script>
</head>
<body>
  <nav><a href="/">Home</a> <a href="/shop">Shop navigation</a></nav>
  <h1>Acme Widgets</h1>
  <h2>Why Acme</h2>
  <p>We build   widgets
     that last.</p>
  <h2>Our Range</h2>
  <p>Over 200 models in stock.</p>
  <footer>Copyright footer text</footer>
</body>
</html>"""


@pytest.fixture
def fake_client_factory():
    return FakeCompletionClient


@pytest.fixture(name="section_body")
def section_body_fixture():
    return section_body
