"""Shared fixtures: a well-formed analysis payload as the service returns it."""

import copy

import pytest

_SOCIAL = {
    "title": "Stop scrolling",
    "description": "Three habits that changed everything.",
    "tags": ["#productivity", "habits"],
}

SAMPLE_PAYLOAD = {
    "cleanedTranscript": "Welcome back. Today we talk about habits.",
    "highlights": [
        {
            "timestamp": "00:15 - 00:45",
            "snippet": "Habits compound like interest.",
            "reason": "Strong quotable hook",
            "title": "Habits Are Interest",
            "visualPrompt": "A glowing coin growing into a tree, cinematic light",
        },
        {
            "timestamp": "01:02 - 01:20",
            "snippet": "Start with two minutes.",
            "reason": "Actionable tip",
            "title": "The 2-Minute Rule",
            "visualPrompt": "A stopwatch on a desk at sunrise",
        },
        {
            "timestamp": "around the end",
            "snippet": "See you next week.",
            "reason": "Outro call to action",
            "title": "Come Back Next Week",
            "visualPrompt": "A waving hand silhouette",
        },
    ],
    "seo": {
        "youtubeShorts": dict(_SOCIAL),
        "tikTok": dict(_SOCIAL),
        "instagramReels": dict(_SOCIAL),
        "facebook": dict(_SOCIAL),
    },
    "captions": "1\n00:00:15,000 --> 00:00:18,000\nHabits compound like interest\n",
    "ffmpegCommands": "ffmpeg -i input.mp4 -ss 00:15 -to 00:45 -vf crop=ih*9/16:ih clip_1.mp4",
    "schedule": [
        {"day": "Day 1", "platform": "TikTok", "time": "18:00", "contentTitle": "Habits Are Interest"},
        {"day": "Day 2", "platform": "YouTube Shorts", "time": "12:00", "contentTitle": "The 2-Minute Rule"},
    ],
    "analyticsReport": {
        "topClip": "Habits Are Interest",
        "bestHashtags": ["#habits", "#growth"],
        "improvements": ["Hook in the first second", "Add on-screen text"],
    },
}


@pytest.fixture
def sample_payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)
