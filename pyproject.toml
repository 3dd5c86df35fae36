[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pawtools"
version = "0.1.0"
description = "Password-manager building blocks: Bech32, HOTP/TOTP, breached-password checks, ICO decoding and a small CLI"
requires-python = ">=3.10"
keywords = ["password", "otp", "totp", "hotp", "bech32", "ico", "pwned-passwords", "clipboard", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
paw-cli = "pawtools.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pawtools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
