"""HTML fixtures and test doubles shared across the folkcontext test suite.

HTML fixtures are trimmed-down copies of the shapes found on Mainly Norfolk:
the main folk index links artists with ``../`` hops, and the ballad indexes
list songs as ``<li><a>Title</a> (Roud N; Child N)</li>``.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from bs4 import BeautifulSoup

FOLK_INDEX_HTML = """\
<html>
<head><title>Mainly Norfolk: English Folk and Other Good Music</title></head>
<body>
<h1>Mainly Norfolk</h1>
<ul>
  <li><a href="../martin.carthy/">Martin Carthy</a></li>
  <li><a href="../shirley.collins/">Shirley Collins</a></li>
  <li><a href="../steeleye.span/records/">Steeleye Span Records</a></li>
  <li><a href="records/topic.html">Topic Records</a></li>
  <li><a href="songs/reynardine.html">Reynardine</a></li>
  <li><a href="/folk/songs/tamlin.html">Tam Lin</a></li>
  <li><a name="anchor-only">Reynardine anchor without href</a></li>
</ul>
</body>
</html>
"""

CHILD_INDEX_HTML = """\
<html>
<head><title>Child Ballads</title></head>
<body>
<ul>
  <li><a href="tamlin.html">Tam Lin</a> (Roud 20; Child 39A)</li>
  <li><a href="lordrandal.html">Lord Randal</a> (Roud 10; Child 12)</li>
  <li><a href="barbaraallen.html">Barbara Allen</a> (Roud 54; Child 84)</li>
  <li><a href="reynardine.html">Reynardine</a> (Roud 397)</li>
  <li>The Elfin Knight, no page yet (Roud 12; Child 2)</li>
  <li><a href="unknown.html">Uncatalogued Song</a> (Roud 9999)</li>
</ul>
</body>
</html>
"""

LAWS_INDEX_HTML = """\
<html>
<head><title>Laws Index</title></head>
<body>
<ul>
  <li><a href="craftyploughboy.html">The Crafty Ploughboy</a> (Roud 399; Laws L1)</li>
  <li><a href="knoxvillegirl.html">The Knoxville Girl</a> (Roud 263; Laws P35)</li>
  <li><a href="sailorsbride.html">The Sailor's Bride</a> (Roud 542; Laws K12)</li>
  <li><a href="reynardine.html">Reynardine</a> (Roud 397)</li>
</ul>
</body>
</html>
"""

SONG_HTML = """\
<html>
<head><title>Reynardine</title></head>
<body>
<h1>Reynardine</h1>
<h2>Reynardine [Roud 397 ; Laws P35]</h2>
<p>Reynardine is a traditional song about a werefox who lures a woman away.</p>
<p>Short.</p>
<h3>Tiny</h3>
<ul>
  <li><a href="../records/anthemsineden.html">Shirley Collins: Anthems in Eden</a></li>
  <li><a href="../records/anthemsineden.html">Shirley Collins: Anthems in Eden</a></li>
  <li><a href="../../fotheringay/records/fotheringay.html">Fotheringay</a></li>
  <li><a href="reynardine.html#lyrics">Lyrics</a></li>
</ul>
<pre>One evening as I rambled
Among the leaves so green</pre>
</body>
</html>
"""

ARTIST_HTML = """\
<html>
<head><title>Shirley Collins</title></head>
<body>
<p>Shirley Collins is an English folk singer who was a significant part of the English Folk Revival.</p>
<p>Short intro.</p>
<p>She recorded with her sister Dolly Collins on a series of influential albums for Harvest.</p>
<ul>
  <li><a href="records/sweetengland.html">Sweet England (1959)</a></li>
  <li><a href="records/anthemsineden.html">Anthems in Eden (1969)</a></li>
  <li><a href="../folk/records/topic.html">Topic Records</a></li>
  <li><a href="http://www.example.com/">External site</a></li>
  <li><a href="lodestar.htm">Lodestar</a></li>
</ul>
</body>
</html>
"""

EMPTY_HTML = "<html><head><title>Empty Page</title></head><body></body></html>"


class FakeClock:
    """Manually advanced UTC clock for cache expiry tests."""

    def __init__(self) -> None:
        self.now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


def make_doc(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


