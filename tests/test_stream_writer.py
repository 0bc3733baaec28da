"""Pipeline / writer: byte accounting, ordering, failure reporting."""

import io
import logging

import numpy as np
import pytest

from SSCE.SMM.config import create
from SSCE.SMM.errors import SignalError, WriteFailure
from SSCE.SGM.sample_encoder import SampleFormat
from SSCE.SGM.sine_generator import generate
from SSCE.SGM.stream_writer import render_bytes, write_file, write_to

from tests.conftest import CountingSink, FailingSink, ShortSink, SilentSink


class TestByteAccounting:
    @pytest.mark.parametrize("fmt", list(SampleFormat))
    def test_bytes_written_matches_sample_count(self, fmt):
        cfg = create(440.0, 0.1, format=fmt)
        sink = CountingSink()
        n = write_to(cfg, sink)
        assert n == cfg.sample_count * (fmt.bit_depth // 8)
        assert n == sink.received == cfg.byte_length

    def test_one_write_per_sample(self, counting_sink):
        cfg = create(440.0, 0.01, format=SampleFormat.PCM32)
        write_to(cfg, counting_sink)
        assert len(counting_sink.chunks) == cfg.sample_count
        assert all(len(c) == 4 for c in counting_sink.chunks)

    def test_bytesio_sink(self):
        cfg = create(440.0, 1.0)
        buf = io.BytesIO()
        n = write_to(cfg, buf)
        assert n == len(buf.getvalue()) == 88_200

    def test_sink_returning_none_counts_full_chunks(self):
        cfg = create(440.0, 0.01)
        sink = SilentSink()
        assert write_to(cfg, sink) == 882 == sink.received

    def test_zero_duration_writes_nothing(self, counting_sink):
        assert write_to(create(440.0, 0.0), counting_sink) == 0
        assert counting_sink.chunks == []


class TestContent:
    @pytest.mark.parametrize("fmt", list(SampleFormat))
    def test_stream_is_samples_in_index_order(self, fmt):
        cfg = create(1_000.0, 0.01, amplitude=0.8, format=fmt)
        expected = b"".join(fmt.convert_sample(s) for s in generate(cfg))
        assert render_bytes(cfg) == expected

    def test_matches_batch_encoding(self):
        cfg = create(220.0, 0.1, amplitude=0.3)
        assert render_bytes(cfg) == cfg.format.convert_samples(generate(cfg))

    def test_float64_stream_decodes_to_samples(self):
        cfg = create(440.0, 0.05, format=SampleFormat.FLOAT64)
        decoded = np.frombuffer(render_bytes(cfg), dtype="<f8")
        np.testing.assert_array_equal(decoded, generate(cfg))

    def test_nyquist_stream_is_all_zero_bytes(self):
        cfg = create(22_050.0, 0.01, sampling_rate=44_100.0)
        data = render_bytes(cfg)
        assert len(data) == 441 * 2
        assert data == b"\x00" * len(data)

    def test_amplitude_above_full_scale_saturates(self):
        cfg = create(441.0, 0.01, amplitude=2.0)
        words = np.frombuffer(render_bytes(cfg), dtype="<i2")
        assert words.max() == 32_767
        assert words.min() == -32_767

    def test_repeated_runs_are_byte_identical(self):
        cfg = create(440.0, 0.1, amplitude=0.8)
        outputs = [render_bytes(cfg) for _ in range(3)]
        assert outputs[0] == outputs[1] == outputs[2]

    def test_distinct_configs_with_same_values_are_identical(self):
        a = render_bytes(create(440.0, 0.1, format="pcm32"))
        b = render_bytes(create(440, 0.1, format=SampleFormat.PCM32))
        assert a == b


class TestFailures:
    def test_failure_reports_partial_count(self):
        cfg = create(440.0, 0.01)
        sink = FailingSink(fail_after=3)
        with pytest.raises(WriteFailure) as info:
            write_to(cfg, sink)
        assert info.value.bytes_written == 6
        assert sink.received == 6
        assert isinstance(info.value.__cause__, OSError)

    def test_failure_on_first_write(self):
        sink = FailingSink(fail_after=0)
        with pytest.raises(WriteFailure) as info:
            write_to(create(440.0, 0.01), sink)
        assert info.value.bytes_written == 0

    def test_no_retry_after_failure(self):
        sink = FailingSink(fail_after=5)
        with pytest.raises(WriteFailure):
            write_to(create(440.0, 0.01), sink)
        assert sink.attempts == 6

    def test_closed_file_is_a_write_failure(self):
        buf = io.BytesIO()
        buf.close()
        with pytest.raises(WriteFailure) as info:
            write_to(create(440.0, 0.01), buf)
        assert isinstance(info.value.__cause__, ValueError)

    def test_transport_specific_error_is_wrapped(self):
        class TransportError(Exception):
            pass

        cfg = create(440.0, 0.01, format=SampleFormat.PCM32)
        sink = FailingSink(fail_after=2, exc=TransportError("connection reset"))
        with pytest.raises(WriteFailure, match="connection reset") as info:
            write_to(cfg, sink)
        assert info.value.bytes_written == 8
        assert isinstance(info.value.__cause__, TransportError)

    def test_short_write_is_a_write_failure(self):
        with pytest.raises(WriteFailure, match="short write") as info:
            write_to(create(440.0, 0.01), ShortSink())
        assert info.value.bytes_written == 1

    def test_write_failure_is_catchable_as_os_error(self):
        with pytest.raises(OSError):
            write_to(create(440.0, 0.01), FailingSink(fail_after=0))
        with pytest.raises(SignalError):
            write_to(create(440.0, 0.01), FailingSink(fail_after=0))

    def test_message_mentions_byte_count(self):
        with pytest.raises(WriteFailure, match="after 4 bytes"):
            write_to(create(440.0, 0.01), FailingSink(fail_after=2, exc=OSError("pipe closed")))

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="SSCE.SGM.stream_writer"):
            with pytest.raises(WriteFailure):
                write_to(create(440.0, 0.01), FailingSink(fail_after=1))
        assert "sink write failed" in caplog.text


class TestWriteFile:
    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "data" / "output.bin"
        cfg = create(440.0, 0.5)
        n = write_file(cfg, path)
        assert path.exists()
        assert path.stat().st_size == n == 44_100

    def test_file_matches_render_bytes(self, tmp_path):
        cfg = create(1_000.0, 0.05, format=SampleFormat.PCM32)
        path = tmp_path / "tone.bin"
        write_file(cfg, str(path))
        assert path.read_bytes() == render_bytes(cfg)
