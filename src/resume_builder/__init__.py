def main() -> int:
    """Entry point for the application.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    from resume_builder.tui import main as tui_main

    tui_main()
    return 0
