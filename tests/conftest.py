import shutil
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def workdir():
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)
