import unittest

from flatstore.data.file_data import DataType, FileData, split_key


class FileDataTest(unittest.TestCase):
    def test_split_key(self):
        self.assertEqual(['a', 'b', 'c'], split_key('a.b.c'))
        self.assertEqual(['a'], split_key('a'))
        for key in ('', 'a..b', '.a', 'a.'):
            with self.assertRaises(ValueError, msg=key):
                split_key(key)

    def test_insert_creates_intermediate_layers(self):
        data = FileData()
        self.assertTrue(data.insert('a.b.c', 1))

        self.assertEqual(1, data.get('a.b.c'))
        self.assertEqual({'c': 1}, data.get('a.b'))
        self.assertEqual({'a': {'b': {'c': 1}}}, data.to_map())

    def test_get_absent_and_through_scalar(self):
        data = FileData({'a': 1, 'b': {'c': 'x'}})

        self.assertIsNone(data.get('missing'))
        self.assertIsNone(data.get('b.missing'))
        self.assertIsNone(data.get('a.b'))
        self.assertIsNone(data.get('b.c.d'))
        self.assertFalse(data.contains_key('a.b'))
        self.assertTrue(data.contains_key('b.c'))
        self.assertIn('b', data)

    def test_insert_replaces_scalar_intermediate(self):
        data = FileData({'a': 5})
        self.assertTrue(data.insert('a.b', 6))
        self.assertEqual({'a': {'b': 6}}, data.to_map())

    def test_insert_reports_unchanged_value(self):
        data = FileData()
        self.assertTrue(data.insert('k', 5))
        self.assertFalse(data.insert('k', 5))
        self.assertTrue(data.insert('k', 5.0))
        self.assertTrue(data.insert('k', True))
        self.assertFalse(data.insert('k', True))
        self.assertTrue(data.insert('m', [1, 2]))
        self.assertFalse(data.insert('m', (1, 2)))
        self.assertTrue(data.insert('n', {'x': 1}))
        self.assertFalse(data.insert('n', {'x': 1}))

    def test_insert_rejects_unsupported_values(self):
        data = FileData({'a': 1})
        with self.assertRaises(TypeError):
            data.insert('a', None)
        with self.assertRaises(TypeError):
            data.insert('b', {'c': object()})
        self.assertEqual({'a': 1}, data.to_map())

    def test_mapping_values_are_expanded_and_copied(self):
        value = {'x.y': 1, 'z': [1, 2]}
        data = FileData()
        data.insert('root', value)
        value['z'].append(3)

        self.assertEqual(1, data.get('root.x.y'))
        self.assertEqual([1, 2], data.get('root.z'))

    def test_constructor_expands_dotted_keys(self):
        data = FileData({'a.b': 1, 'a.c': 2, 'd': 3})
        self.assertEqual({'a': {'b': 1, 'c': 2}, 'd': 3}, data.to_map())

    def test_constructor_merges_dotted_keys_into_layers(self):
        data = FileData({'a': {'b': 1}, 'a.c': 2})
        self.assertEqual({'a': {'b': 1, 'c': 2}}, data.to_map())

    def test_constructor_rejects_colliding_keys(self):
        for entries in (
                {'a': 1, 'a.b': 2},
                {'a.b': 2, 'a': 1},
                {'a': {'b': 1}, 'a.b': 2},
                {'a.b': 2, 'a': {'b': {'c': 1}}}):
            with self.subTest(entries=entries):
                with self.assertRaises(ValueError):
                    FileData(entries)

    def test_insert_rejects_mapping_with_colliding_keys(self):
        data = FileData({'a': 1})

        with self.assertRaises(ValueError):
            data.insert('b', {'x': 1, 'x.y': 2})
        self.assertEqual({'a': 1}, data.to_map())

    def test_remove_keeps_empty_ancestors(self):
        data = FileData({'a': {'b': {'c': 1}}})

        self.assertTrue(data.remove('a.b.c'))
        self.assertFalse(data.contains_key('a.b.c'))
        self.assertEqual({}, data.get('a.b'))
        self.assertTrue(data.contains_key('a.b'))
        self.assertEqual({'a': {'b': {}}}, data.to_map())

    def test_remove_absent(self):
        data = FileData({'a': 1})
        self.assertFalse(data.remove('b'))
        self.assertFalse(data.remove('a.b'))
        self.assertFalse(data.remove('x.y.z'))
        self.assertEqual({'a': 1}, data.to_map())

    def test_key_set(self):
        data = FileData({'a': {'b': 1, 'c': 2}, 'd': 3})

        self.assertEqual(['a.b', 'a.c', 'd'], data.key_set())
        self.assertEqual(['a', 'd'], data.single_layer_key_set())

    def test_key_set_with_prefix(self):
        data = FileData({'a': {'b': {'x': 1}, 'c': 2}, 'd': 3})

        self.assertEqual(['b.x', 'c'], data.key_set('a'))
        self.assertEqual(['b', 'c'], data.single_layer_key_set('a'))
        self.assertEqual([], data.key_set('d'))
        self.assertEqual([], data.key_set('missing'))
        self.assertEqual([], data.single_layer_key_set('d'))

    def test_empty_layer_has_no_terminal_keys(self):
        data = FileData({'a': {}, 'b': 1})
        self.assertEqual(['b'], data.key_set())
        self.assertEqual(['a', 'b'], data.single_layer_key_set())
        self.assertEqual(1, len(data))

    def test_standard_keeps_insertion_order(self):
        data = FileData({'z': 1, 'a': {'y': 1, 'b': 2}})
        self.assertEqual(['z', 'a.y', 'a.b'], data.key_set())
        self.assertEqual(['z', 'a'], list(data.to_map()))

    def test_sorted_orders_every_layer(self):
        data = FileData({'z': 1, 'a': {'y': 1, 'b': 2}}, DataType.SORTED)
        self.assertEqual(['a.b', 'a.y', 'z'], data.key_set())
        self.assertEqual(['a', 'z'], data.single_layer_key_set())
        exported = data.to_map()
        self.assertEqual(['a', 'z'], list(exported))
        self.assertEqual(['b', 'y'], list(exported['a']))

    def test_to_map_is_detached(self):
        data = FileData({'a': {'b': [1]}})
        exported = data.to_map()
        exported['a']['b'].append(2)
        exported['a']['c'] = 3

        self.assertEqual({'a': {'b': [1]}}, data.to_map())

    def test_size_and_clear(self):
        data = FileData({'a': {'b': 1, 'c': 2}, 'd': 3})
        self.assertEqual(3, data.size())
        self.assertEqual(2, data.size('a'))

        data.clear()
        self.assertEqual(0, len(data))
        self.assertEqual({}, data.to_map())

    def test_equality(self):
        self.assertEqual(FileData({'a.b': 1}), FileData({'a': {'b': 1}}))
        self.assertNotEqual(FileData({'a': 1}), FileData({'a': True}))
        self.assertNotEqual(FileData({'a': 1}), {'a': 1})


if __name__ == '__main__':
    unittest.main()
