"""
SeisSAC's testing configuration file.
"""
import logging

import pytest


@pytest.fixture(autouse=True)
def seissac_log_level(caplog):
    """
    Capture INFO and above of the seissac loggers in every test.
    """
    caplog.set_level(logging.INFO, logger='seissac')
