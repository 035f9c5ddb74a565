"""Tests for the store layer.

Test Files and Coverage:
========================

| Test File              | Test Classes        | Tested Constructs                   | Tested Functionalities                         |
|------------------------|---------------------|-------------------------------------|------------------------------------------------|
| test_flat_file.py      | FlatFileTest        | FlatFile                            | Creation, seeding, write-through, bulk writes, |
|                        |                     |                                     | write failures, equality                       |
| test_reload.py         | ReloadTest          | FlatFile, ReloadSetting             | Manual/automatic/intelligent reload, failures  |
| test_storage_base.py   | StorageBaseTest     | StorageBase typed accessors         | Zero values, coercion, defaults, get_as        |
| test_section.py        | FlatSectionTest     | FlatSection                         | Prefix delegation, nesting, bulk writes        |
| test_concurrency.py    | ConcurrencyTest     | FlatFile locking                    | Concurrent writers and readers                 |
| test_settings.py       | StoreSettingsTest   | StoreSettings                       | TOML settings loading                          |
"""
