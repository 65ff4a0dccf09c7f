import json

import pytest

from radio_schedule.services.schedule_types import ScheduleItem


# Two day tabs (Monday, Tuesday), two show cards each. The second card of
# each tab only has the caption title, not the header block.
RNS_PAGE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Ramówka</title></head>
<body>
<div class="proradio-tabs">
  <div class="proradio-tabs__content" id="poniedzialek">
    <div class="proradio-post proradio-post__card--shows">
      <div class="proradio-post__card__cap">
        <h3 class="proradio-post__title">Caption title</h3>
        <p class="proradio-itemmetas">06:00 - 09:00</p>
      </div>
      <div class="proradio-post__headercont proradio-post__headercont--ex">
        <h4> Poranek Radia Nowy Świat </h4>
        <p>Budzimy się razem.</p>
        <h6>Anna Nowak</h6>
        <h6> Jan Kowalski </h6>
      </div>
    </div>
    <div class="proradio-post proradio-post__card--shows">
      <div class="proradio-post__card__cap">
        <h3 class="proradio-post__title">Nocne granie</h3>
        <span class="proradio-itemmetas"> 23:00 - 01:00 </span>
      </div>
    </div>
  </div>
  <div class="proradio-tabs__content" id="wtorek">
    <div class="proradio-post proradio-post__card--shows">
      <div class="proradio-post__card__cap">
        <p class="proradio-itemmetas">10:00 - 12:30</p>
      </div>
      <div class="proradio-post__headercont--ex">
        <h4>Przedpołudnie</h4>
        <h6>Ewa Wiśniewska i Piotr Zieliński</h6>
      </div>
    </div>
    <div class="proradio-post proradio-post__card--shows">
      <div class="proradio-post__card__cap">
        <h3 class="proradio-post__title">Wieczór</h3>
        <p class="proradio-itemmetas">18:00 - 20:00</p>
      </div>
    </div>
  </div>
</div>
</body>
</html>
"""


def make_schedule_state() -> list:
    """Radio 357 schedule state: two days, three items."""
    return [
        {
            "date": "2024-01-01",
            "items": [
                {
                    "id": 1,
                    "start_at": 1704085200000,
                    "end_at": 1704092400000,
                    "hosts": [{"firstname": "Anna", "lastname": "Nowak", "id": 7}],
                    "program": {"name": "Poranek", "description": "Morning show"},
                },
            ],
        },
        {
            "date": "2024-01-02",
            "items": [
                {
                    "start_at": 1704171600000,
                    "end_at": 1704178800000.5,
                    "hosts": [
                        {"firstname": "Jan", "lastname": "Kowalski"},
                        {"firstname": "Ewa", "lastname": "Wiśniewska"},
                    ],
                    "program": {"name": "Popołudnie", "description": ""},
                },
                {
                    "start_at": 1704178800000,
                    "end_at": 1704182400000,
                    "hosts": [],
                    "program": {"name": "Wiadomości", "description": "News"},
                },
            ],
        },
    ]


def make_nuxt_script(state) -> str:
    """Nuxt-style SSR script assigning the state through a function call."""
    return (
        "window.__NUXT__=(function(a,b){return {layout:\"default\",data:[{}],"
        f"state:{{schedule:{{schedule:{json.dumps(state, ensure_ascii=False)}}}}}}}}}(1,\"x\"));"
    )


def make_radio357_page(script: str | None) -> str:
    script_tags = ""
    if script is not None:
        script_tags = f"<script>{script}</script><script src=\"/_nuxt/app.js\"></script>"
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        "<script>var headScript = true;</script></head>"
        f"<body><div id=\"__nuxt\"><p>Ramówka</p></div>{script_tags}</body></html>"
    )


class FakeFetcher:
    """Stands in for DocumentFetcher, serving canned pages or raising."""

    def __init__(self, content: bytes | None = None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.urls: list[str] = []

    async def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def rns_page() -> bytes:
    return RNS_PAGE.encode("utf-8")


@pytest.fixture
def schedule_state() -> list:
    return make_schedule_state()


@pytest.fixture
def radio357_page(schedule_state) -> bytes:
    return make_radio357_page(make_nuxt_script(schedule_state)).encode("utf-8")


@pytest.fixture
def expected_radio357_items() -> list[ScheduleItem]:
    return [
        ScheduleItem(1704085200000, 1704092400000, "Poranek", "Morning show", ["Anna Nowak"]),
        ScheduleItem(
            1704171600000, 1704178800000.5, "Popołudnie", "", ["Jan Kowalski", "Ewa Wiśniewska"]
        ),
        ScheduleItem(1704178800000, 1704182400000, "Wiadomości", "News", []),
    ]
