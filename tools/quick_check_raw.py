"""
Quick numeric checker for a raw sinegen output stream.
Usage: python tools/quick_check_raw.py path/to/output.bin [format=pcm16] [rate=44100]
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from SSCE.SGM.sample_encoder import SampleFormat
from SSCE.SVM.raw_decoder import dequantize, estimate_frequency, peak_and_rms, read_raw_file

if len(sys.argv) < 2:
    print("Usage: python tools/quick_check_raw.py file.bin [format=pcm16] [rate=44100]")
    raise SystemExit

f    = sys.argv[1]
fmt  = SampleFormat.from_name(sys.argv[2]) if len(sys.argv) > 2 else SampleFormat.PCM16
sr   = float(sys.argv[3]) if len(sys.argv) > 3 else 44_100.0

size = os.path.getsize(f)
if size % fmt.sample_width:
    print(f"[!!] {size} bytes is not a whole number of {fmt} samples - wrong format?")
    raise SystemExit(1)
if size == 0:
    print(f"{f}: empty stream")
    raise SystemExit

words = read_raw_file(f, fmt, sr)
x = dequantize(words, fmt)
peak, rms = peak_and_rms(x)
est = estimate_frequency(x, sr)

print("=" * 60)
print(f"File        : {f}")
print(f"Format      : {fmt} ({fmt.bit_depth}-bit, {fmt.sample_width} bytes/sample)")
print(f"Sample rate : {sr:.0f} Hz (assumed)")
print(f"Samples     : {len(x)}")
print(f"Duration    : {len(x) / sr:.3f} s")
print("=" * 60)
print(f"  peak={peak:.4f}  rms={rms:.4f}")
if est is None:
    print("  frequency : too few zero crossings - silence or gated tone")
else:
    print(f"  frequency : ~{est:.2f} Hz")
print("=" * 60)
