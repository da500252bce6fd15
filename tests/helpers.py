"""
Shared fixtures for the beanflow test suite.

The markup below mirrors the shape of the service's user-state
fragments closely enough for every parser to find what it looks for.
`FakeTransport` replays canned bodies so no test touches the network.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Tuple

from beanflow.errors import TransportError
from beanflow.session.transport import Transport

NEW_WORD_HTML = """
<div id="session-state" data-state="new_word"></div>
<div id="trainer-nav">
  <form name="Next &#8211; word" action="/advance">
    <input type="hidden" name="event" value="next!">
    <input type="hidden" name="barrier" value="b1">
  </form>
  <form name="&#8220;Back&#8221;" action="/advance">
    <input type="hidden" name="event" value="back!">
    <input type="hidden" name="barrier" value="b1">
  </form>
</div>
<div id="misc-word-info"><span> adjective </span><span>Level 3
      Core</span></div>
<h1 class="wordform">
  gregarious
</h1>
<div id="orthoepy"> gre-GAIR-ee-uhs </div>
<div id="pronounce-sound" path="/audio/gregarious.mp3"></div>
<img id="bk-img" src="/img/gregarious.jpg">
<div id="context-paragraph">She was   gregarious
  and outgoing.</div>
<div class="question"><span>Quiz</span> Choose:  Which   word fits?</div>
<div class="answer"> sociable </div>
<ul>
  <li class="choice"> sociable </li>
  <li class="choice">shy</li>
</ul>
<div class="def-text">Someone who is gregarious
   enjoys company.</div>
<div class="one-word-tab-right"> sociable </div>
<div id="examples"><div class="content"><ul>
  <li>He was   gregarious at parties. <span class="attribution">&#8212; The Times</span></li>
  <li>Another
     example.</li>
</ul></div></div>
<div id="word-structure"><div class="content">
  <p>greg  means flock</p>
  <table>
    <tr><td>greg</td><td class="meaning">flock</td></tr>
    <tr><td>-ious</td><td>x</td><td class="meaning">having the nature of</td></tr>
  </table>
</div></div>
<div id="related-words"><div class="content">
  <div class="related-syns"><div data-idx="1"><span>sociable</span></div></div>
  <div class="related-ants"><div data-idx="2"><span>reclusive</span></div></div>
</div></div>
<div class="rw-defn idx1">friendly and  outgoing</div>
<div class="rw-defn idx2">avoiding
   company</div>
<div id="word-flags"><span>
  <form name="ikt">
    <input type="hidden" name="event" value="ikt!">
    <input type="hidden" name="barrier" value="b1">
  </form>
</span></div>
"""

RESTUDY_HTML = NEW_WORD_HTML.replace('data-state="new_word"', 'data-state="restudy"')

QUIZ_HTML = """
<div id="session-state" data-state="quiz"></div>
<div id="trainer-nav">
  <form name="Skip"><input type="hidden" name="event" value="skip!"></form>
</div>
<div id="training-clock-stats">
  <span class="large"> 01:23 </span><span class="small">of</span><span class="large">05:00</span>
</div>
<form name="Pass">
  <input type="hidden" name="event" value="answer!">
  <input type="hidden" name="correct" value="true">
  <input type="hidden" name="barrier" value="q1">
</form>
<form name="Fail">
  <input type="hidden" name="event" value="answer!">
  <input type="hidden" name="correct" value="false">
  <input type="hidden" name="barrier" value="q1">
</form>
"""

SPELLTEST_HTML = """
<div id="session-state" data-state="spelltest"></div>
<div id="trainer-nav"></div>
<form name="Pass"><input type="hidden" name="event" value="spell!"><input type="hidden" name="ok" value="1"></form>
<form name="Fail"><input type="hidden" name="event" value="spell!"><input type="hidden" name="ok" value="0"></form>
"""

TAKE_A_BREAK_HTML = """
<div id="session-state" data-state="take_a_break"></div>
<p>Time for a break.</p>
<form action="/done">
  <input type="hidden" name="barrier" value="abc123">
  <input type="submit" name="commit" value="Done">
</form>
"""

UNKNOWN_HTML = '<div id="session-state" data-state="crossword"></div>'

REDIRECT_JSON = '{"redirect_url": "https://x/y"}'


class FakeTransport(Transport):
    """Transport that replays `bodies` for successive GETs and records POSTs."""

    def __init__(
        self, bodies: List[str], *, fail_post: bool = False, fail_get: bool = False
    ) -> None:
        self.bodies = list(bodies)
        self.fail_post = fail_post
        self.fail_get = fail_get
        self.posts: List[Tuple[str, str]] = []
        self.gets: List[str] = []
        self.closed = False

    async def post_form(self, url: str, body: str) -> str:
        if self.fail_post:
            raise TransportError("connection reset", url=url)
        self.posts.append((url, body))
        return ""

    async def get_text(self, url: str) -> str:
        self.gets.append(url)
        if self.fail_get:
            raise TransportError("HTTP 503", status=503, url=url)
        return self.bodies.pop(0)

    async def close(self) -> None:
        self.closed = True


class GatedTransport(FakeTransport):
    """FakeTransport whose GETs block until `gate` is set."""

    def __init__(self, bodies: List[str], gate: Optional[asyncio.Event] = None) -> None:
        super().__init__(bodies)
        self.gate = gate

    async def get_text(self, url: str) -> str:
        if self.gate is not None:
            await self.gate.wait()
        return await super().get_text(url)
