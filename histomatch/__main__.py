"""
Allow running the package with: python -m histomatch

By default, runs the ranking CLI. Subcommands give access to diagnostics
and configuration.

Examples:
    python -m histomatch /path/to/photos -o ./sorted   # Rank and copy
    python -m histomatch compare a.jpg b.jpg            # Score one pair
    python -m histomatch histogram a.jpg b.jpg          # Write .dat histograms
    python -m histomatch config --init                  # Create example config file
"""

import sys


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'compare':
        from .cli import compare_main
        sys.exit(compare_main(sys.argv[2:]))
    elif len(sys.argv) > 1 and sys.argv[1] == 'histogram':
        from .cli import histogram_main
        sys.exit(histogram_main(sys.argv[2:]))
    elif len(sys.argv) > 1 and sys.argv[1] == 'config':
        from .user_config import get_user_config

        config = get_user_config()

        if '--init' in sys.argv or '-i' in sys.argv:
            # Create example config file
            if config.create_example_config():
                print(f"✓ Created example configuration file at:")
                print(f"  {config.config_file_path}")
                print(f"\nEdit this file to customize Histomatch settings.")
            else:
                print(f"✗ Failed to create configuration file.")
                sys.exit(1)
        else:
            # Show current config path and values
            print(f"Configuration file: {config.config_file_path}")
            if config.config_file_path.exists():
                print(f"Status: ✓ Found")
            else:
                print(f"Status: ✗ Not found (using defaults)")
                print(f"\nRun 'python -m histomatch config --init' to create one.")

            print(f"\nCurrent settings:")
            print(f"  default_workers: {config.default_workers}")
            print(f"  default_scorer: {config.default_scorer}")
            print(f"  output_dir: {config.output_dir or '(not set)'}")
            print(f"  max_image_pixels: {config.max_image_pixels:,}")
    else:
        from .cli import main as cli_main
        sys.exit(cli_main(sys.argv[1:]))


if __name__ == '__main__':
    main()
