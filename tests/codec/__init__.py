"""Tests for codec backends.

Test Files and Coverage:
========================

| Test File        | Test Classes                         | Tested Constructs                     | Tested Functionalities                  |
|------------------|--------------------------------------|---------------------------------------|-----------------------------------------|
| test_codecs.py   | MsgpackCodecTest, TomlCodecTest,     | MsgpackCodec, TomlCodec, JsonCodec,   | Load/dump, empty input, settings        |
|                  | JsonCodecTest, CodecForPathTest      | codec_for_path                        | passthrough, error wrapping             |
"""
