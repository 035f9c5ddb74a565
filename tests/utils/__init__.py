"""Tests for utility modules.

Test Files and Coverage:
========================

| Test File            | Test Classes     | Tested Constructs                                  | Tested Functionalities             |
|----------------------|------------------|----------------------------------------------------|------------------------------------|
| test_file_utils.py   | FileUtilsTest    | create_file, file_stamp, write_seed,               | Creation, stamping, replace-on-    |
|                      |                  | replace_on_write                                   | write, failure cleanup             |
"""
