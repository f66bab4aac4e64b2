"""

    crudr.tests -- test suite
    =========================

"""
