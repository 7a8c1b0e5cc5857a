"""Test configuration for paste2gradle."""

import tempfile
from pathlib import Path

import pytest

SAMPLE_ACTIVITY = """package com.other.demo;

import android.app.Activity;
import android.os.Bundle;

public class MainActivity extends Activity {
    @Override
    protected void onCreate(Bundle savedInstanceState) {
        super.onCreate(savedInstanceState);
        setContentView(R.layout.activity_main);
    }
}"""

SAMPLE_HELPER = """package com.other.demo.util;

public class TextHelper {
    public static String shout(String s) { return s.toUpperCase(); }
}"""

SAMPLE_LAYOUT = """<?xml version="1.0" encoding="utf-8"?>
<!-- screen_home.xml -->
<LinearLayout xmlns:android="http://schemas.android.com/apk/res/android"
    android:layout_width="match_parent"
    android:layout_height="match_parent"
    android:orientation="vertical">
</LinearLayout>"""

SAMPLE_COLORS = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <color name="primary">#6200EE</color>
</resources>"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_paste():
    """Pasted text with two classes, a layout, colors and a stray note.

    Returns:
        str: Chunks separated by "=====" and "-----" dividers.
    """
    return "\n=====\n".join([
        SAMPLE_ACTIVITY,
        SAMPLE_HELPER,
        SAMPLE_LAYOUT,
    ]) + "\n-----\n" + SAMPLE_COLORS + "\n-----\nRemember to add icons later.\n"


@pytest.fixture
def config():
    """Default configuration, independent of the environment.

    Returns:
        Config: A fresh configuration with built-in defaults.
    """
    from paste2gradle.core.config import Config
    return Config()


@pytest.fixture
def storage(temp_dir):
    """Create a storage backend for testing.

    Args:
        temp_dir: Pytest fixture providing a temporary directory path.

    Returns:
        LocalStorageBackend: A local storage backend rooted at the temporary directory.
    """
    from paste2gradle.storage import LocalStorageBackend
    return LocalStorageBackend(temp_dir)
