import os
import shutil
import subprocess

import pytest

ROOT_DIR = os.path.realpath(f'{__file__}/../..')


@pytest.mark.skipif(not shutil.which('flake8'), reason='flake8 is not installed')
def test_flake8():
    subprocess.check_call(['flake8', 'src', 'test'], cwd=ROOT_DIR)
