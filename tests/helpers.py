"""Payload builders and transport doubles shared by the tests."""

import httpx


APOD_PAYLOAD = {
    "date": "2024-12-24",
    "explanation": "The Orion Nebula is a diffuse nebula...",
    "hdurl": "https://apod.nasa.gov/hd.jpg",
    "media_type": "image",
    "title": "Orion Nebula",
    "url": "https://apod.nasa.gov/image.jpg",
}


def make_article(article_id: int) -> dict:
    """One well-formed Spaceflight News result."""
    return {
        "id": article_id,
        "title": f"Article {article_id}",
        "url": f"https://news.example.com/{article_id}",
        "image_url": f"https://news.example.com/{article_id}.jpg",
        "news_site": "SpaceNews",
        "summary": f"Summary {article_id}",
        "published_at": "2024-12-20T10:30:00Z",
        "updated_at": "2024-12-20T11:00:00Z",
    }


def make_news_page(ids: list[int]) -> dict:
    return {
        "count": 1000,
        "next": "https://api.spaceflightnewsapi.net/v4/articles/?limit=5&offset=5",
        "previous": None,
        "results": [make_article(i) for i in ids],
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)


def json_transport(payload, status_code: int = 200, headers: dict = None) -> RecordingTransport:
    """Transport answering every request with the same JSON body."""
    return RecordingTransport(
        lambda request: httpx.Response(status_code, json=payload, headers=headers)
    )
