#!/usr/bin/env python3
"""
Command-line interface for the easing visualizer.

Usage
-----
::

    # List functions (optionally only ScriptMapper-compatible ones)
    python -m easing_visualizer list --compatible

    # Evaluate a function
    python -m easing_visualizer eval drift 0.5 -x 3 -y 7

    # Export as a ScriptMapper command
    python -m easing_visualizer format quadratic --ease easeout

    # Decode a ScriptMapper command
    python -m easing_visualizer parse IOCubic

    # Sample a curve for plotting
    python -m easing_visualizer sample bounce --samples 11 --json

    # Preview a function driven by an input signal at time t
    python -m easing_visualizer preview led-sine 0.25 --signal sine
"""

import argparse
import json
import logging
import sys
from dataclasses import replace

from .core import (
    EaseType,
    EasingVisualizerException,
    FunctionFamily,
    REGISTRY,
    configure_logging,
    evaluate,
    list_signals,
    sample_curve,
)
from .adapters import SCRIPTMAPPER
from .config import PreviewConfig, load_config

EASE_CHOICES = [e.value for e in EaseType]


def _add_param_args(parser, with_ease=True):
    parser.add_argument("-x", type=int, default=None, help="Drift X parameter (0-10)")
    parser.add_argument("-y", type=int, default=None, help="Drift Y parameter (0-10)")
    if with_ease:
        parser.add_argument(
            "--ease",
            choices=EASE_CHOICES,
            default=None,
            help="Ease type (default: from config, easein)",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="easing-visualizer",
        description="Evaluate, compare and export easing / LED curves",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("--config", metavar="PATH", help="Preview config JSON")

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List registered functions")
    list_parser.add_argument(
        "--compatible", action="store_true", help="Only ScriptMapper-compatible functions"
    )
    list_parser.add_argument(
        "--family", choices=[f.value for f in FunctionFamily], help="Only one family"
    )

    eval_parser = subparsers.add_parser("eval", help="Evaluate a function at one input")
    eval_parser.add_argument("function", help="Function id")
    eval_parser.add_argument("value", type=float, help="Input value 0-1")
    _add_param_args(eval_parser)

    format_parser = subparsers.add_parser("format", help="Format as a ScriptMapper command")
    format_parser.add_argument("function", help="Function id")
    format_parser.add_argument("--short", action="store_true", help="Use I / O / IO prefixes")
    _add_param_args(format_parser)

    parse_parser = subparsers.add_parser("parse", help="Decode a ScriptMapper command")
    parse_parser.add_argument("text", help="Command or comma-separated bookmark name")

    sample_parser = subparsers.add_parser("sample", help="Sample a curve over [0, 1]")
    sample_parser.add_argument("function", help="Function id")
    sample_parser.add_argument("--samples", type=int, default=None, help="Number of samples")
    sample_parser.add_argument("--json", action="store_true", help="Print JSON")
    _add_param_args(sample_parser)

    preview_parser = subparsers.add_parser(
        "preview", help="Preview a function driven by an input signal"
    )
    preview_parser.add_argument("function", help="Function id")
    preview_parser.add_argument("time", type=float, help="Time value fed to the input signal")
    preview_parser.add_argument(
        "--signal", choices=list_signals(), default=None, help="Input signal (default: from config)"
    )
    preview_parser.add_argument(
        "--multiplier", type=float, default=None, help="Cycles per unit of time"
    )
    _add_param_args(preview_parser)

    return parser


def _params(args, config: PreviewConfig) -> dict:
    return {
        "x": config.drift_x if args.x is None else args.x,
        "y": config.drift_y if args.y is None else args.y,
    }


def _ease(args, config: PreviewConfig) -> EaseType:
    return EaseType(args.ease or config.ease)


def cmd_list(args) -> int:
    if args.compatible:
        descriptors = REGISTRY.list_compatible()
    else:
        descriptors = REGISTRY.list_all()
    if args.family:
        descriptors = [d for d in descriptors if d.family.value == args.family]

    for d in descriptors:
        external = d.export_name or "-"
        print(f"{d.id:<20} {d.name:<24} {d.family.value:<7} {external:<8} {d.formula}")
    return 0


def cmd_eval(args, config: PreviewConfig) -> int:
    output = evaluate(args.function, _params(args, config), args.value, _ease(args, config))
    print(f"{output:.6f}")
    return 0


def cmd_format(args, config: PreviewConfig) -> int:
    formatter = SCRIPTMAPPER.format_short_command if args.short else SCRIPTMAPPER.format_command
    command = formatter(args.function, _ease(args, config), _params(args, config))
    target = SCRIPTMAPPER.config.target_name
    if command is None:
        print(f"Error: '{args.function}' has no {target} command", file=sys.stderr)
        return 1
    print(command)
    return 0


def cmd_parse(args) -> int:
    command = SCRIPTMAPPER.extract_easing_from_bookmark(args.text)
    target = SCRIPTMAPPER.config.target_name
    if command is None:
        print(f"Error: no {target} easing in '{args.text}'", file=sys.stderr)
        return 1

    parsed = SCRIPTMAPPER.parse_command(command)
    result = {"command": command, "function": parsed.function_id, "ease": parsed.ease.value}
    if parsed.params is not None:
        result["params"] = parsed.params.to_dict()
    print(json.dumps(result))
    return 0


def cmd_sample(args, config: PreviewConfig) -> int:
    samples = args.samples if args.samples is not None else config.samples
    inputs, outputs = sample_curve(
        args.function, _params(args, config), _ease(args, config), samples
    )
    if args.json:
        print(json.dumps({"inputs": inputs.tolist(), "outputs": outputs.tolist()}))
    else:
        for x, y in zip(inputs, outputs):
            print(f"{x:.4f}\t{y:.6f}")
    return 0


def cmd_preview(args, config: PreviewConfig) -> int:
    overrides = {
        "drift_x": args.x,
        "drift_y": args.y,
        "ease": args.ease,
        "signal": args.signal,
        "cycle_multiplier": args.multiplier,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
    sample = config.preview_at(args.function, args.time)
    print(json.dumps(sample.to_dict()))
    return 0


def main(args=None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if parsed.verbose:
        configure_logging(logging.DEBUG)

    if parsed.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(parsed.config) if parsed.config else PreviewConfig()

        if parsed.command == "list":
            return cmd_list(parsed)
        if parsed.command == "eval":
            return cmd_eval(parsed, config)
        if parsed.command == "format":
            return cmd_format(parsed, config)
        if parsed.command == "parse":
            return cmd_parse(parsed)
        if parsed.command == "preview":
            return cmd_preview(parsed, config)
        return cmd_sample(parsed, config)
    except EasingVisualizerException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
