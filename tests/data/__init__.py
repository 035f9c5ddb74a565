"""Tests for the in-memory data model.

Test Files and Coverage:
========================

| Test File            | Test Classes        | Tested Constructs                 | Tested Functionalities                    |
|----------------------|---------------------|-----------------------------------|-------------------------------------------|
| test_file_data.py    | FileDataTest        | FileData, DataType, split_key     | Dotted get/insert/remove, key sets, order |
| test_value.py        | ValueKindTest       | kind_of, copy_value, same_value   | Classification, copying, kind-aware eq    |
| test_primitive.py    | PrimitiveTest       | Primitive                         | Coercion table, ranges, failures          |
"""
