# ==============================================================================
# Файл: tests/test_pipeline.py
# Назначение: Интеграционные тесты: fBm -> нормализация -> смешивание.
# ==============================================================================
import logging
import os
import tempfile
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

import simplex_terrain as st
from simplex_terrain.export import field_to_gray8, write_height_preview
from simplex_terrain.pipeline import apply_fbm_to_heightmap, generate_fbm_heightmap
from simplex_terrain.preset import load_preset
from simplex_terrain.utils.diag import diag_array


class TestEndToEnd(unittest.TestCase):

    def test_synthesize_normalize_blend_with_zero_field(self):
        raw = st.synthesize(8, 8, 3, 4, 1.0)
        norm = st.normalize(raw, 0, 1)
        out = st.blend(norm, np.zeros((8, 8)), 0.5)
        self.assertEqual(out.shape, (8, 8))
        self.assertGreaterEqual(float(out.min()), 0.0)
        self.assertLessEqual(float(out.max()), 0.5)
        self.assertAlmostEqual(float(out.max()), 0.5, places=9)


class TestPipeline(unittest.TestCase):

    def test_generate_heightmap_range_and_shape(self):
        p = load_preset({"fbm": {"octaves": 4}})
        field = generate_fbm_heightmap(20, 12, p)
        self.assertEqual(field.shape, (12, 20))
        self.assertAlmostEqual(float(field.min()), 0.0, places=12)
        self.assertAlmostEqual(float(field.max()), 1.0, places=9)

    def test_generate_respects_target_range(self):
        p = load_preset({"fbm": {"octaves": 2}, "normalize": {"min": -5.0, "max": 5.0}})
        field = generate_fbm_heightmap(10, 10, p)
        self.assertAlmostEqual(float(field.min()), -5.0, places=9)
        self.assertAlmostEqual(float(field.max()), 5.0, places=9)

    def test_apply_full_blend_replaces_existing(self):
        p = load_preset({"fbm": {"octaves": 3}, "blend": 1.0})
        existing = np.full((9, 11), 0.7)
        out = apply_fbm_to_heightmap(existing, p)
        np.testing.assert_array_equal(out, generate_fbm_heightmap(11, 9, p))

    def test_apply_zero_blend_keeps_existing(self):
        p = load_preset({"fbm": {"octaves": 3}, "blend": 0.0})
        existing = np.linspace(0.0, 1.0, 48).reshape(6, 8)
        out = apply_fbm_to_heightmap(existing, p)
        np.testing.assert_array_equal(out, existing)
        self.assertFalse(np.shares_memory(out, existing))

    def test_apply_partial_blend(self):
        p = load_preset({"fbm": {"octaves": 2}, "blend": 0.25})
        existing = np.ones((5, 5))
        out = apply_fbm_to_heightmap(existing, p)
        expected = generate_fbm_heightmap(5, 5, p) * 0.25 + 0.75
        np.testing.assert_allclose(out, expected, atol=1e-12)

    def test_legacy_bounds_flattens_small_noise(self):
        # сырой simplex-сигнал мал по модулю, и с затравкой [0,1] он почти не растягивается
        p = load_preset({"fbm": {"octaves": 3}, "normalize": {"legacy_bounds": True}})
        field = generate_fbm_heightmap(16, 16, p)
        self.assertLess(float(field.max() - field.min()), 0.5)

    def test_apply_rejects_bad_existing(self):
        p = load_preset({"fbm": {"octaves": 1}})
        with self.assertRaises(st.InvalidInputError):
            apply_fbm_to_heightmap(None, p)
        with self.assertRaises(st.InvalidInputError):
            apply_fbm_to_heightmap(np.zeros(10), p)
        bad = np.zeros((4, 4))
        bad[1, 1] = np.nan
        with self.assertRaises(st.InvalidInputError):
            apply_fbm_to_heightmap(bad, p)

    def test_single_pixel_map_is_degenerate(self):
        p = load_preset({"fbm": {"octaves": 1}})
        with self.assertRaises(st.DegenerateRangeError):
            apply_fbm_to_heightmap(np.zeros((1, 1)), p)

    def test_errors_share_base_class(self):
        self.assertTrue(issubclass(st.InvalidInputError, st.NoiseError))
        self.assertTrue(issubclass(st.DegenerateRangeError, st.NoiseError))
        self.assertTrue(issubclass(st.PresetValidationError, st.PresetError))

    def test_diag_logs_stats(self):
        with self.assertLogs("simplex_terrain.utils.diag", level=logging.DEBUG) as cm:
            diag_array(np.array([[0.0, 1.0]]), "probe")
        self.assertIn("DIAG probe", cm.output[0])
        self.assertIn("max=1.0000", cm.output[0])


class TestPreview(unittest.TestCase):

    def test_gray8_conversion(self):
        gray = field_to_gray8(np.array([[0.0, 0.5, 1.0, 2.0, -1.0]]))
        self.assertEqual(gray.dtype, np.uint8)
        self.assertEqual(gray.tolist(), [[0, 128, 255, 255, 0]])

    def test_write_preview(self):
        from PIL import Image

        field = generate_fbm_heightmap(16, 8, load_preset({"fbm": {"octaves": 2}}))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sub", "preview.png")
            write_height_preview(path, field, scale=2)
            self.assertTrue(os.path.exists(path))
            with Image.open(path) as img:
                self.assertEqual(img.size, (32, 16))
                self.assertEqual(img.mode, "L")


if __name__ == '__main__':
    unittest.main()
