[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtckit"
version = "0.1.0"
description = "WebRTC state types, RTP sample assembly and media file writers (IVF, Ogg Opus, rtpdump)"
requires-python = ">=3.10"
dependencies = []
keywords = ["webrtc", "rtp", "rtpdump", "ivf", "vp8", "opus", "ogg", "sdp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Video",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtckit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
