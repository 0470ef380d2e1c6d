"""
Regression Tests for the Ephemeris Generator
============================================

End-to-end runs of the ephemeris generator without network access.

Tests:
------
TestRegressionEndToEnd
  - test_regression_gust86_run_completes   : full theory run writes one CSV per satellite and a log
  - test_regression_mean_theory_ecliptic   : secular theory in ECLIPJ2000 completes
  - test_regression_invalid_input_raises   : invalid configuration raises before any output

TestCLIIntegration
  - test_regression_cli_basic_run          : `python -m gust86.main` completes and writes output

Usage:
------
  python -m pytest gust86/validation/test_regression.py -v
"""
import subprocess
import sys

import pytest
import numpy  as np
import pandas as pd

from datetime import datetime

from gust86.main                import main
from gust86.utility.writer      import EPHEMERIS_COLUMNS


TIMESPAN = [datetime(1986, 1, 24, 0, 0, 0), datetime(1986, 1, 25, 0, 0, 0)]


class TestRegressionEndToEnd:
  """
  End-to-end regression tests.
  """

  def test_regression_gust86_run_completes(self, tmp_path, supported_satellites):
    result = main(
      satellites        = ['miranda', 'oberon'],
      timespan          = TIMESPAN,
      step              = 3600.0,
      output_folderpath = tmp_path,
    )

    assert result['success'], result['message']
    assert list(result['ephemerides'].keys()) == ['Miranda', 'Oberon']
    assert result['comparisons'] == {}

    for name, filepath in result['files'].items():
      ephemeris_df = pd.read_csv(filepath)
      assert list(ephemeris_df.columns) == EPHEMERIS_COLUMNS
      assert len(ephemeris_df) == 25

      pos_mag = np.linalg.norm(ephemeris_df[['pos_x', 'pos_y', 'pos_z']].to_numpy(), axis=1)
      assert np.allclose(pos_mag, supported_satellites[name.upper()]['mean_radius__km'], rtol=0.03)

    log_text = result['config'].log_filepath.read_text()
    assert 'Input Configuration' in log_text
    assert 'Results Summary' in log_text

  def test_regression_mean_theory_ecliptic(self, tmp_path):
    result = main(
      satellites        = ['umbriel'],
      timespan          = TIMESPAN,
      step              = 21600.0,
      frame             = 'ECLIPJ2000',
      theory            = 'mean',
      output_folderpath = tmp_path,
    )

    assert result['success'], result['message']
    assert result['ephemerides']['Umbriel']['frame'] == 'ECLIPJ2000'
    assert result['files']['Umbriel'].name == 'umbriel_mean_eclipj2000.csv'

  def test_regression_invalid_input_raises(self, tmp_path):
    with pytest.raises(ValueError):
      main(satellites=['miranda'], timespan=TIMESPAN, step=-1.0, output_folderpath=tmp_path)

    assert list(tmp_path.iterdir()) == []


class TestCLIIntegration:
  """
  Command-line invocation tests.
  """

  def test_regression_cli_basic_run(self, tmp_path, project_root):
    result = subprocess.run(
      [
        sys.executable, '-m', 'gust86.main',
        '--satellites', 'titania',
        '--timespan', '1986-01-24T00:00:00', '1986-01-24T06:00:00',
        '--step', '3600',
        '--output-folderpath', str(tmp_path),
      ],
      capture_output = True,
      text           = True,
      cwd            = str(project_root),
      timeout        = 300,
    )

    assert result.returncode == 0, result.stderr
    assert 'Results Summary' in result.stdout
    assert len(list(tmp_path.glob('*/files/titania_gust86_j2000.csv'))) == 1
