"""Raw stream decoder and measurement helpers."""

import io

import numpy as np
import pytest

from SSCE.SMM.config import create
from SSCE.SGM.sample_encoder import SampleFormat
from SSCE.SGM.sine_generator import generate
from SSCE.SGM.stream_writer import render_bytes, write_file
from SSCE.SVM.raw_decoder import (
    decode_bytes,
    dequantize,
    estimate_frequency,
    peak_and_rms,
    read_raw_file,
)


class TestDecodeBytes:
    def test_pcm16_words(self):
        words = decode_bytes(b"\xff\x3f\x01\xc0", SampleFormat.PCM16)
        assert words.tolist() == [16_383, -16_383]

    def test_accepts_format_name(self):
        words = decode_bytes(b"\xff\xff\xff\x7f", "pcm32")
        assert words.tolist() == [2_147_483_647]

    def test_misaligned_stream_is_rejected(self):
        with pytest.raises(ValueError, match="not a whole number"):
            decode_bytes(b"\x00\x00\x00", SampleFormat.PCM16)

    def test_empty_stream(self):
        assert decode_bytes(b"", SampleFormat.FLOAT64).size == 0

    def test_float64_stream_round_trips_generated_buffer(self):
        cfg = create(440.0, 0.02, amplitude=0.6, format=SampleFormat.FLOAT64)
        np.testing.assert_array_equal(decode_bytes(render_bytes(cfg), cfg.format), generate(cfg))


class TestDequantize:
    @pytest.mark.parametrize("fmt", [SampleFormat.PCM16, SampleFormat.PCM32])
    def test_pcm_recovers_samples_within_one_step(self, fmt):
        cfg = create(440.0, 0.05, amplitude=0.9, format=fmt)
        x = dequantize(decode_bytes(render_bytes(cfg), fmt), fmt)
        np.testing.assert_allclose(x, generate(cfg), rtol=0, atol=1.0 / fmt.full_scale)

    def test_full_scale_maps_to_one(self):
        x = dequantize(np.array([32_767, -32_767, 0], dtype=np.int16), SampleFormat.PCM16)
        assert x.tolist() == [1.0, -1.0, 0.0]

    def test_float64_passes_through(self):
        x = dequantize(np.array([2.5, -0.25]), SampleFormat.FLOAT64)
        assert x.tolist() == [2.5, -0.25]


class TestReadRawFile:
    @pytest.mark.parametrize("fmt", [SampleFormat.PCM16, SampleFormat.PCM32])
    def test_soundfile_matches_numpy_decode(self, fmt):
        cfg = create(1_000.0, 0.05, amplitude=0.7, format=fmt)
        data = render_bytes(cfg)
        words = read_raw_file(io.BytesIO(data), fmt, cfg.sampling_rate)
        np.testing.assert_array_equal(words, decode_bytes(data, fmt))

    def test_reads_from_path(self, tmp_path):
        cfg = create(440.0, 0.1)
        path = tmp_path / "tone.bin"
        write_file(cfg, path)
        words = read_raw_file(str(path), cfg.format, cfg.sampling_rate)
        assert len(words) == cfg.sample_count


class TestMeasurements:
    @pytest.mark.parametrize("frequency", [100.0, 440.0, 1_000.0, 5_000.0])
    def test_estimate_frequency(self, frequency):
        samples = generate(create(frequency, 1.0))
        assert estimate_frequency(samples, 44_100.0) == pytest.approx(frequency, rel=1e-3)

    def test_silence_has_no_frequency(self):
        samples = generate(create(22_050.0, 0.1))
        assert estimate_frequency(samples, 44_100.0) is None

    def test_peak_and_rms_of_full_scale_sine(self):
        peak, rms = peak_and_rms(generate(create(441.0, 1.0)))
        assert peak == pytest.approx(1.0)
        assert rms == pytest.approx(1 / np.sqrt(2), rel=1e-3)

    def test_peak_and_rms_of_empty(self):
        assert peak_and_rms([]) == (0.0, 0.0)
