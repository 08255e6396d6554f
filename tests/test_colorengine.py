"""
Tests for the batch engine: agreement with the scalar value types, shape
handling, packing and the strict/fast kernel toggle.
"""

import logging

import numpy as np
import pytest

import prisma_colorengine as ce
from color_models import CieLab, CieXyz, LinearSrgb, Srgb
from prisma_colorengine import (
    M_LINEAR_SRGB_TO_XYZ,
    M_XYZ_TO_LINEAR_SRGB,
    ColorSpaceEngine,
)
from prisma_illuminants import Illuminants


@pytest.fixture
def rgb_batch():
    """Random in-gamut sRGB rows plus a few edge rows."""
    rng = np.random.default_rng(1234)
    rows = rng.random((256, 3))
    edges = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 1.0, 1.0],
        [0.04045, 0.5, 0.0031308],
        [1.0, 0.0, 0.0],
    ])
    return np.vstack([rows, edges])


@pytest.fixture
def fast_mode():
    ce.set_strict_ieee(False)
    yield
    ce.set_strict_ieee(True)


class TestMatrices:
    def test_inverse(self):
        np.testing.assert_allclose(
            M_LINEAR_SRGB_TO_XYZ @ M_XYZ_TO_LINEAR_SRGB, np.eye(3), atol=1e-14
        )

    def test_close_to_published_iec_matrix(self):
        published = np.array([
            [0.4124564, 0.3575761, 0.1804375],
            [0.2126729, 0.7151522, 0.0721750],
            [0.0193339, 0.1191920, 0.9503041],
        ])
        np.testing.assert_allclose(M_LINEAR_SRGB_TO_XYZ, published, atol=5e-4)

    def test_white_row_sums(self):
        np.testing.assert_allclose(
            M_LINEAR_SRGB_TO_XYZ.sum(axis=1), Illuminants.D65.as_array(), atol=1e-14
        )

    def test_y_row_sums_to_one(self):
        assert M_LINEAR_SRGB_TO_XYZ[1].sum() == pytest.approx(1.0, abs=1e-14)


class TestShapes:
    def test_single_pixel_returns_1d(self):
        lab = ColorSpaceEngine.srgb_to_lab(np.array([1.0, 1.0, 1.0]))
        assert lab.shape == (3,)
        np.testing.assert_allclose(lab, (100.0, 0.0, 0.0), atol=1e-9)

    def test_batch_shape_preserved(self, rgb_batch):
        assert ColorSpaceEngine.srgb_to_linear(rgb_batch).shape == rgb_batch.shape

    def test_accepts_lists_and_integers(self):
        linear = ColorSpaceEngine.srgb_to_linear([[1, 0, 1]])
        assert linear.dtype == np.float64
        np.testing.assert_array_equal(linear, [[1.0, 0.0, 1.0]])

    @pytest.mark.parametrize("bad", [
        np.zeros(4),
        np.zeros((5, 2)),
        np.zeros((2, 2, 3)),
    ])
    def test_rejects_bad_shapes(self, bad):
        with pytest.raises(ValueError, match="Expected shape"):
            ColorSpaceEngine.xyz_to_lab(bad)

    def test_input_not_mutated(self, rgb_batch):
        before = rgb_batch.copy()
        ColorSpaceEngine.srgb_to_lab(rgb_batch)
        np.testing.assert_array_equal(rgb_batch, before)


class TestAgreementWithValueTypes:
    def test_srgb_to_linear(self, rgb_batch):
        batch = ColorSpaceEngine.srgb_to_linear(rgb_batch)
        for row, out in zip(rgb_batch, batch):
            lin = Srgb(*row).to_linear_srgb()
            np.testing.assert_allclose(out, (lin.r, lin.g, lin.b), rtol=1e-15, atol=0)

    def test_linear_to_xyz(self, rgb_batch):
        batch = ColorSpaceEngine.linear_srgb_to_xyz(rgb_batch)
        for row, out in zip(rgb_batch, batch):
            xyz = LinearSrgb(*row).to_cie_xyz()
            np.testing.assert_allclose(out, (xyz.x, xyz.y, xyz.z), rtol=1e-15, atol=1e-17)

    def test_xyz_to_lab(self, rgb_batch):
        batch = ColorSpaceEngine.xyz_to_lab(rgb_batch)
        for row, out in zip(rgb_batch, batch):
            lab = CieXyz(*row).to_cie_lab()
            np.testing.assert_allclose(out, (lab.L, lab.a, lab.b), rtol=1e-14, atol=1e-12)

    def test_lab_to_xyz(self):
        lab = np.array([[50.0, 20.0, -30.0], [5.0, -80.0, 90.0], [100.0, 0.0, 0.0]])
        batch = ColorSpaceEngine.lab_to_xyz(lab)
        for row, out in zip(lab, batch):
            xyz = CieLab(*row).to_cie_xyz()
            np.testing.assert_allclose(out, (xyz.x, xyz.y, xyz.z), rtol=1e-15, atol=1e-17)

    def test_full_pipeline_round_trip(self, rgb_batch):
        lab = ColorSpaceEngine.srgb_to_lab(rgb_batch)
        back = ColorSpaceEngine.lab_to_srgb(lab)
        np.testing.assert_allclose(back, rgb_batch, atol=1e-12)

    def test_linear_round_trip(self, rgb_batch):
        xyz = ColorSpaceEngine.linear_srgb_to_xyz(rgb_batch)
        back = ColorSpaceEngine.xyz_to_linear_srgb(xyz)
        np.testing.assert_allclose(back, rgb_batch, atol=1e-14)

    def test_transfer_round_trip(self, rgb_batch):
        back = ColorSpaceEngine.linear_to_srgb(ColorSpaceEngine.srgb_to_linear(rgb_batch))
        np.testing.assert_allclose(back, rgb_batch, atol=1e-12)

    def test_lch_round_trip(self):
        lab = np.array([[50.0, 20.0, -30.0], [70.0, -10.0, 5.0]])
        lch = ColorSpaceEngine.lab_to_lch(lab)
        assert np.all((lch[:, 2] >= 0.0) & (lch[:, 2] < 360.0))
        np.testing.assert_allclose(ColorSpaceEngine.lch_to_lab(lch), lab, atol=1e-12)
        first = CieLab(*lab[0]).to_cie_lch()
        np.testing.assert_allclose(lch[0], (first.L, first.C, first.h), rtol=1e-15)

    def test_nan_propagates(self):
        lab = ColorSpaceEngine.lab_to_xyz(np.array([[np.nan, 0.0, 0.0]]))
        assert np.all(np.isnan(lab))


class TestPacking:
    def test_pack_matches_value_type(self):
        rows = np.array([[2.0, -1.0, 0.5], [0.5, 0.5, 0.5], [np.nan, 1.0, 1.0]])
        packed = ColorSpaceEngine.pack_rgb8(rows)
        expected = [Srgb(*row).to_packed24() for row in rows]
        np.testing.assert_array_equal(packed, expected)
        assert packed[0] == 0xFE0180

    def test_single_pixel(self):
        assert ColorSpaceEngine.pack_rgb8(np.array([1.0, 0.0, 1.0])) == 0xFF00FF

    def test_unpack_scalar(self):
        np.testing.assert_array_equal(
            ColorSpaceEngine.unpack_rgb8(0xFA00FA), (0xFA / 255.0, 0.0, 0xFA / 255.0)
        )

    def test_unpack_rejects_2d(self):
        with pytest.raises(ValueError):
            ColorSpaceEngine.unpack_rgb8(np.zeros((2, 2), dtype=np.int64))

    def test_unpack_matches_value_type(self):
        colors = np.array([0x000000, 0x123456, 0xFFFFFF])
        rows = ColorSpaceEngine.unpack_rgb8(colors)
        for color, row in zip(colors, rows):
            c = Srgb.from_packed24(int(color))
            np.testing.assert_array_equal(row, (c.r, c.g, c.b))

    def test_full_24_bit_identity(self):
        """Every 24-bit colour survives unpack -> pack, in 1M-colour chunks."""
        chunk = 1 << 20
        for start in range(0, 1 << 24, chunk):
            colors = np.arange(start, start + chunk, dtype=np.int64)
            packed = ColorSpaceEngine.pack_rgb8(ColorSpaceEngine.unpack_rgb8(colors))
            np.testing.assert_array_equal(packed, colors)


class TestGamut:
    def test_rows(self):
        rows = np.array([
            [1.5, 0.5, -0.1],
            [0.0, 0.5, 1.0],
            [np.nan, 0.5, 0.5],
        ])
        np.testing.assert_array_equal(ColorSpaceEngine.in_gamut(rows), [False, True, False])

    def test_matches_value_type(self, rgb_batch):
        shifted = rgb_batch * 1.2 - 0.1
        mask = ColorSpaceEngine.in_gamut(shifted)
        expected = [Srgb(*row).is_in_gamut() for row in shifted]
        np.testing.assert_array_equal(mask, expected)


class TestStrictToggle:
    def test_default_is_strict(self):
        assert ce.is_strict_ieee() is True

    def test_fast_agrees_with_strict(self, rgb_batch):
        strict_lab = ColorSpaceEngine.srgb_to_lab(rgb_batch)
        strict_back = ColorSpaceEngine.lab_to_srgb(strict_lab)
        ce.set_strict_ieee(False)
        try:
            fast_lab = ColorSpaceEngine.srgb_to_lab(rgb_batch)
            fast_back = ColorSpaceEngine.lab_to_srgb(fast_lab)
        finally:
            ce.set_strict_ieee(True)
        np.testing.assert_allclose(fast_lab, strict_lab, atol=1e-9)
        np.testing.assert_allclose(fast_back, strict_back, atol=1e-9)

    def test_fast_mode_round_trip(self, fast_mode, rgb_batch):
        assert ce.is_strict_ieee() is False
        xyz = ColorSpaceEngine.linear_srgb_to_xyz(rgb_batch)
        np.testing.assert_allclose(
            ColorSpaceEngine.xyz_to_linear_srgb(xyz), rgb_batch, atol=1e-12
        )

    def test_toggle_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="prisma_colorengine"):
            ce.set_strict_ieee(False)
            ce.set_strict_ieee(True)
        messages = [r.getMessage() for r in caplog.records]
        assert "Batch kernels switched to fast mode" in messages
        assert "Batch kernels switched to strict mode" in messages

    def test_value_types_unaffected(self, fast_mode):
        lab = CieXyz(float("nan"), 0.0, 0.0).to_cie_lab()
        assert np.isnan(lab.a)
