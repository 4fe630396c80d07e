"""
main.py - mackerel-plugin-aws-ecs 실행 진입점

Usage:
    python main.py --cluster-name prod
    mackerel-plugin-aws-ecs --cluster-name prod   # pip install 후 console script
"""

from cli.app import cli


def main() -> None:
    """console script 진입점 (cli.app:cli 위임)"""
    cli(prog_name="mackerel-plugin-aws-ecs")


if __name__ == "__main__":
    main()
