"""Shared test fixtures for Mermaidify."""

import pytest

from mermaidify.config.models import MermaidifyConfig


FLOWCHART_HTML = '<pre><code class="language-mermaid">flowchart LR\n  A --&gt; B</code></pre>'

POST_HTML = (
    '<h2 id="overview">Overview</h2>\n'
    '<pre><code class="language-mermaid">flowchart LR\n  A --&gt; B</code></pre>\n'
    '<p>Some text &amp; more.</p>\n'
    '<pre><code class="language-python">print(1)</code></pre>\n'
    '<pre><code class="language-mermaid">sequenceDiagram\n  Alice-&gt;&gt;Bob: Hi</code></pre>\n'
    '<p>After</p>'
)


@pytest.fixture
def sample_config():
    return MermaidifyConfig()


@pytest.fixture
def post_html():
    return POST_HTML


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no project-local or user-global mermaidify.yaml."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
    return tmp_path


@pytest.fixture
def site_dir(tmp_path):
    """A small generated site: posts, a feed, and a vendored page."""
    site = tmp_path / "_site"
    (site / "posts").mkdir(parents=True)
    (site / "vendor").mkdir()
    (site / "index.html").write_text("<h1>Home</h1>\n<p>No diagrams here.</p>")
    (site / "posts" / "intro.html").write_text(POST_HTML)
    (site / "feed.xml").write_text(f"<feed><content>{FLOWCHART_HTML}</content></feed>")
    (site / "vendor" / "lib.html").write_text(FLOWCHART_HTML)
    return site
