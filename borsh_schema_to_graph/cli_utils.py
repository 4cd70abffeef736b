"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROG_NAME = "borsh_schema_to_graph"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    # Try to get current Click context for parameter values
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
        command_path = ctx.command_path or PROG_NAME
    except RuntimeError:
        # No active context, return basic command
        return PROG_NAME

    if not cli_args:
        return command_path

    cmd_parts = [command_path]
    arguments = []
    options = []

    for param in click_command.params:
        value = cli_args.get(param.name)
        if value is None or value is False or value == "":
            continue

        # Show file paths by name only
        if isinstance(value, (str, Path)):
            path_obj = Path(str(value))
            formatted_value = path_obj.name if path_obj.exists() else str(value)
        else:
            formatted_value = str(value.value if hasattr(value, "value") else value)

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)

        elif isinstance(param, click.Option):
            if value == param.default:
                continue

            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, formatted_value])

    cmd_parts.extend(arguments)
    cmd_parts.extend(options)

    return " ".join(cmd_parts)
