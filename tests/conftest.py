import copy

import pytest

SAMPLE_PAYLOAD = {
    "data": {
        "AuthorWorklog": {
            "activityMeta": [
                {"label": "commits", "fillColor": "#EF6B6B"},
                {"label": "reviews", "fillColor": "#61CDBB"},
            ],
            "rows": [
                {
                    "name": "alice@example.com",
                    "totalActivity": [
                        {"name": "commits", "value": "3"},
                        {"name": "reviews", "value": "1"},
                    ],
                    "dayWiseActivity": [
                        {
                            "date": "2024-01-01",
                            "items": {"children": [{"label": "commits", "count": "2"}, {"label": "reviews", "count": "1"}]},
                        },
                        {"date": "2024-01-02", "items": {"children": [{"label": "commits", "count": "1"}]}},
                    ],
                },
                {
                    "name": "bob@example.com",
                    "totalActivity": [
                        {"name": "commits", "value": "5"},
                        {"name": "issues", "value": "2"},
                    ],
                    "dayWiseActivity": [],
                },
            ],
        }
    }
}


@pytest.fixture
def sample_payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)
