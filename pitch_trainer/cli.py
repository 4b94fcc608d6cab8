"""Command-line interface for Pitch Trainer.

Provides commands for:
- notes: List selectable target notes
- freq / note / cents: Note, frequency and cents conversions
- track: Frame-by-frame pitch of a recording against a target note
- exercise: Score a sung melody exercise recording
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .analysis import DetectorConfig, PitchDetector, PitchFeedback, cents_difference, classify_cents
from .core import frequency_to_note, get_available_notes, note_to_frequency
from .core.constants import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_HOP_LENGTH,
    DEFAULT_MAX_FREQUENCY,
    DEFAULT_MIN_FREQUENCY,
    DEFAULT_ROOT_NOTE,
    DEFAULT_SILENCE_THRESHOLD,
    DEFAULT_TARGET_NOTE,
    DEFAULT_TEMPO,
)

app = typer.Typer(
    name="pitch-trainer",
    help="Pitch detection and feedback for vocal training",
    rich_markup_mode="markdown",
)
console = Console()

FEEDBACK_STYLES = {
    PitchFeedback.ON_PITCH: "green",
    PitchFeedback.SHARP: "red",
    PitchFeedback.FLAT: "blue",
    PitchFeedback.NO_PITCH: "dim",
}


def _format_cents(cents: Optional[float]) -> str:
    if cents is None:
        return "--"
    return f"{cents:+.0f}"


def _build_detector(silence_threshold: float, fmin: float, fmax: float) -> PitchDetector:
    config = DetectorConfig(
        silence_threshold=silence_threshold,
        min_frequency=fmin,
        max_frequency=fmax,
    )
    try:
        return PitchDetector.from_config(config)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _load_frames(input_file: Path, frame_length: int, hop_length: int):
    from .input import AudioLoader

    loader = AudioLoader()
    try:
        audio, sr = loader.load(str(input_file))
        frames = loader.frames(audio, frame_length=frame_length, hop_length=hop_length)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    times = loader.frame_times(len(frames), sr=sr, hop_length=hop_length)
    return loader, audio, sr, frames, times


@app.command()
def notes():
    """List the selectable target notes (C2 to C6)."""
    table = Table(title="Available Notes")
    table.add_column("Note", style="cyan")
    table.add_column("Frequency (Hz)", style="green")
    table.add_column("MIDI", style="yellow")

    for note in get_available_notes():
        table.add_row(note.name, f"{note.frequency:.1f}", str(note.midi))

    console.print(table)


@app.command()
def freq(
    name: str = typer.Argument(..., help="Note name, e.g. A4 or C#3"),
):
    """Print the equal-tempered frequency of a note."""
    try:
        frequency = note_to_frequency(name)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"{name.upper()}: [green]{frequency:.2f} Hz[/green]")


@app.command()
def note(
    frequency: float = typer.Argument(..., help="Frequency in Hz"),
):
    """Print the nearest note to a frequency and the offset in cents."""
    try:
        nearest = frequency_to_note(frequency)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    cents = cents_difference(frequency, nearest.frequency)
    console.print(
        f"{frequency:.2f} Hz -> [cyan]{nearest.name}[/cyan] "
        f"({nearest.frequency:.2f} Hz, MIDI {nearest.midi}) {_format_cents(cents)} cents"
    )


@app.command()
def cents(
    detected: float = typer.Argument(..., help="Detected frequency in Hz"),
    target: float = typer.Argument(..., help="Target frequency in Hz"),
):
    """Print the cents deviation of detected from target (positive = sharp)."""
    value = cents_difference(detected, target)
    feedback = classify_cents(value)
    style = FEEDBACK_STYLES[feedback]
    console.print(f"{_format_cents(value)} cents [{style}]{feedback.value}[/{style}]")


@app.command()
def track(
    input_file: Path = typer.Argument(..., help="Input audio file (WAV, MP3, ...)"),
    target: str = typer.Option(
        DEFAULT_TARGET_NOTE, "-t", "--target", help="Target note name"
    ),
    frame_length: int = typer.Option(
        DEFAULT_BUFFER_SIZE, "--frame-length", help="Samples per analysis buffer"
    ),
    hop_length: int = typer.Option(
        DEFAULT_HOP_LENGTH, "--hop-length", help="Samples between buffers"
    ),
    silence_threshold: float = typer.Option(
        DEFAULT_SILENCE_THRESHOLD, "--silence-threshold", help="RMS below which a buffer is silent"
    ),
    fmin: float = typer.Option(
        DEFAULT_MIN_FREQUENCY, "--fmin", help="Lowest accepted pitch (Hz)"
    ),
    fmax: float = typer.Option(
        DEFAULT_MAX_FREQUENCY, "--fmax", help="Highest accepted pitch (Hz)"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Track pitch frame by frame and compare it to a target note.

    **Examples:**

        pitch-trainer track take1.wav -t A3

        pitch-trainer track take1.wav --fmin 80 --fmax 500 --json
    """
    from .training import PitchMonitor

    detector = _build_detector(silence_threshold, fmin, fmax)
    try:
        monitor = PitchMonitor(target=target, detector=detector)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not json_output:
        console.print(f"[blue]Loading audio:[/blue] {input_file}")
    loader, audio, sr, frames, _ = _load_frames(input_file, frame_length, hop_length)

    readings = list(monitor.run(frames, sr, hop_length=hop_length))
    voiced = [r for r in readings if r.has_pitch]
    on_pitch = [r for r in voiced if r.feedback == PitchFeedback.ON_PITCH]

    if json_output:
        result = {
            "input": str(input_file),
            "target": {"name": monitor.target.name, "frequency": monitor.target.frequency},
            "sample_rate": sr,
            "duration": loader.get_duration(audio, sr),
            "frames": [
                {
                    "time": r.time,
                    "frequency": r.frequency,
                    "note": r.note.name if r.note else None,
                    "cents": r.cents,
                    "feedback": r.feedback.value,
                }
                for r in readings
            ],
            "voiced_frames": len(voiced),
            "on_pitch_frames": len(on_pitch),
        }
        console.print_json(data=result)
        return

    table = Table(title=f"Pitch vs {monitor.target.name} ({monitor.target.frequency:.1f} Hz)")
    table.add_column("Time", style="yellow")
    table.add_column("Frequency", style="green")
    table.add_column("Note", style="cyan")
    table.add_column("Cents")

    for r in readings:
        style = FEEDBACK_STYLES[r.feedback]
        table.add_row(
            f"{r.time:.3f}",
            f"{r.frequency:.1f}" if r.has_pitch else "(no pitch)",
            r.note.name if r.note else "--",
            f"[{style}]{_format_cents(r.cents)}[/{style}]",
        )

    console.print(table)
    console.print(
        f"Voiced frames: {len(voiced)}/{len(readings)}, "
        f"on pitch: [green]{len(on_pitch)}[/green]"
    )


@app.command()
def exercise(
    input_file: Path = typer.Argument(..., help="Recording of the sung exercise"),
    root: str = typer.Option(DEFAULT_ROOT_NOTE, "-r", "--root", help="Root note (degree 1)"),
    tempo: float = typer.Option(DEFAULT_TEMPO, "-b", "--tempo", help="Tempo in BPM, one note per beat"),
    degrees: Optional[List[int]] = typer.Option(
        None, "-d", "--degree", help="Scale degree, repeat per note (default: 1 3 5 8)"
    ),
    sharps: Optional[List[int]] = typer.Option(
        None, "--sharp", help="1-based note position to raise a semitone"
    ),
    ups: Optional[List[int]] = typer.Option(
        None, "--up", help="1-based note position to raise an octave"
    ),
    downs: Optional[List[int]] = typer.Option(
        None, "--down", help="1-based note position to lower an octave"
    ),
    frame_length: int = typer.Option(
        DEFAULT_BUFFER_SIZE, "--frame-length", help="Samples per analysis buffer"
    ),
    hop_length: int = typer.Option(
        DEFAULT_HOP_LENGTH, "--hop-length", help="Samples between buffers"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Score a melody exercise: each note is sung for one beat from the start of the file.

    **Examples:**

        pitch-trainer exercise attempt.wav -r C4 -b 60 -d 1 -d 3 -d 5 -d 8

        pitch-trainer exercise attempt.wav -d 1 -d 4 --sharp 2
    """
    from .training import ExerciseNote, MelodyExercise

    degrees = degrees or [1, 3, 5, 8]
    sharps, ups, downs = set(sharps or []), set(ups or []), set(downs or [])
    if ups & downs:
        console.print("[red]Error: a note cannot move both up and down an octave[/red]")
        raise typer.Exit(1)

    exercise_notes = [
        ExerciseNote(
            degree=degree,
            sharp=position in sharps,
            octave_offset=1 if position in ups else -1 if position in downs else 0,
        )
        for position, degree in enumerate(degrees, start=1)
    ]

    try:
        session = MelodyExercise(root=root, tempo=tempo, notes=exercise_notes)
        targets = session.target_frequencies()
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not json_output:
        console.print(f"[blue]Loading audio:[/blue] {input_file}")
    _, _, sr, frames, times = _load_frames(input_file, frame_length, hop_length)

    detector = PitchDetector()
    session.record_all([detector.detect(frame, sr) for frame in frames], times)
    results = session.results()

    if json_output:
        console.print_json(
            data={
                "input": str(input_file),
                "root": session.root_note.name,
                "tempo": tempo,
                "notes": [
                    {
                        "label": r.label,
                        "target_frequency": r.target_frequency,
                        "samples": r.samples,
                        "mean_cents": r.mean_cents,
                        "feedback": r.feedback.value,
                    }
                    for r in results
                ],
                "all_on_pitch": session.all_on_pitch(),
            }
        )
        return

    table = Table(title=f"Exercise in {session.root_note.name} at {tempo:g} BPM")
    table.add_column("Degree", style="cyan")
    table.add_column("Target (Hz)", style="green")
    table.add_column("Samples", style="yellow")
    table.add_column("Mean cents")

    for r, target_frequency in zip(results, targets):
        style = FEEDBACK_STYLES[r.feedback]
        table.add_row(
            r.label,
            f"{target_frequency:.1f}",
            str(r.samples),
            f"[{style}]{_format_cents(r.mean_cents)}[/{style}]",
        )

    console.print(table)
    if session.all_on_pitch():
        console.print("[green]Great job! All notes were on pitch![/green]")
    else:
        console.print("[yellow]Check your pitch accuracy above.[/yellow]")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
