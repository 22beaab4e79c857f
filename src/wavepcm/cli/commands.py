import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Annotated, Literal

from cyclopts import App, Parameter
from rich.console import Console
from rich.table import Table

from wavepcm.cli.validators import validate_channel_count, validate_sampling_rate
from wavepcm.errors import WaveError
from wavepcm.io import load_wav, read_file, save_wav, write_file
from wavepcm.reader import decode
from wavepcm.summary import summary_rows
from wavepcm.validation import validate
from wavepcm.writer import encode as encode_wav

BitDepth = Literal[8, 16, 24, 32]

app = App(name="wavepcm", help="Encode, decode and validate WAVE PCM files")
console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(message, style="bold red")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(message, style="bold green")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(message, style="bold yellow")


def print_json(payload: dict[str, object]) -> None:
    """Print JSON without wrapping or markup."""
    console.print(json.dumps(payload, indent=2), soft_wrap=True, markup=False, highlight=False)


@app.command
def info(
    file: Path,
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
) -> int:
    """
    Show the header of a validated WAVE PCM file.

    Parameters
    ----------
    file: Path
        The path to the .wav file
    output_json: bool
        Output the header as JSON (default: False)
    """
    try:
        wav = load_wav(file)
    except (OSError, WaveError) as e:
        print_error(f"Error reading {file}: {e}")
        return 1

    if output_json:
        print_json(
            {
                "file": str(file),
                "header": asdict(wav.header),
                "num_frames": wav.num_frames,
                "duration_seconds": wav.duration,
            }
        )
        return 0

    print_success(f"The WAVE PCM format of {file} has been validated")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Field", justify="left")
    table.add_column("Value", justify="right")
    for label, value in summary_rows(wav):
        table.add_row(label, value)

    console.print(table)
    return 0


@app.command
def check(
    file: Path,
    strict: bool = False,
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
) -> int:
    """
    Validate a WAVE PCM file.

    Every header rule is checked and all failures are reported, along with
    warnings for files that are valid but suspicious.

    Parameters
    ----------
    file: Path
        The path to the .wav file to validate
    strict: bool
        Treat warnings as errors (default: False)
    output_json: bool
        Output results as JSON (default: False)
    """
    results: dict[str, object] = {
        "file": str(file),
        "valid": True,
        "errors": [],
        "warnings": [],
    }

    try:
        wav = decode(read_file(file))
    except (OSError, WaveError) as e:
        results["valid"] = False
        results["errors"] = [str(e)]
        if output_json:
            print_json(results)
        else:
            print_error(f"[FAIL] {file}")
            console.print(f"  {e}", markup=False)
        return 1

    result = validate(wav)
    errors = list(result.errors)

    # In strict mode, warnings become errors
    if strict:
        errors.extend(f"Strict mode: {w}" for w in result.warnings)

    results["valid"] = not errors
    results["errors"] = errors
    results["warnings"] = result.warnings

    if output_json:
        print_json(results)
        return 0 if results["valid"] else 1

    if results["valid"]:
        print_success(f"[PASS] {file}")
        console.print(f"  Channels: {wav.header.num_channels}")
        console.print(f"  Sampling rate: {wav.header.sampling_rate} Hz")
        console.print(f"  Bits per sample: {wav.header.bits_per_sample}")
        console.print(f"  Duration: {wav.duration:.3f}s")

        for warning in result.warnings:
            print_warning(f"  [WARN] {warning}")
    else:
        print_error(f"[FAIL] {file}")
        for error in errors:
            console.print(f"  {error}", markup=False)

    return 0 if results["valid"] else 1


@app.command
def encode(
    source: Path,
    output: Path,
    *,
    channels: Annotated[int, Parameter(validator=validate_channel_count)],
    rate: Annotated[int, Parameter(validator=validate_sampling_rate)],
    bits: BitDepth,
) -> int:
    """
    Wrap a raw PCM file in a WAVE header.

    The samples are copied unchanged; they must already be interleaved and
    in the requested bit depth (8-bit unsigned, wider depths signed
    little-endian).

    Parameters
    ----------
    source: Path
        The raw PCM input file
    output: Path
        The output destination for the .wav file
    channels: int
        Number of interleaved channels
    rate: int
        Sampling rate in Hz
    bits: BitDepth
        Bits per sample
    """
    try:
        data = read_file(source)
    except OSError as e:
        print_error(f"Error reading {source}: {e}")
        return 1

    try:
        wav = encode_wav(data, channels, rate, bits)
        save_wav(output, wav)
    except (OSError, WaveError) as e:
        print_error(f"Error writing output: {e}")
        return 1

    print_success(f"Encoded {source} -> {output}")
    console.print(f"  Frames: {wav.num_frames}")
    console.print(f"  Duration: {wav.duration:.3f}s")
    return 0


@app.command
def extract(file: Path, output: Path) -> int:
    """
    Write the raw sample data of a WAVE PCM file.

    Parameters
    ----------
    file: Path
        The path to the .wav file
    output: Path
        The output destination for the raw PCM data
    """
    try:
        wav = load_wav(file)
        write_file(output, wav.data)
    except (OSError, WaveError) as e:
        print_error(f"Error extracting {file}: {e}")
        return 1

    print_success(f"Extracted {len(wav.data)} bytes from {file} -> {output}")
    return 0


if __name__ == "__main__":
    sys.exit(app())
