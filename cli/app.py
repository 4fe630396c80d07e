"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 mackerel-agent 플러그인 진입점입니다.
agent가 수집 주기마다 1회 실행하며, 1회 조회 후 종료합니다.

명령어 구조:
    mackerel-plugin-aws-ecs --cluster-name prod
    mackerel-plugin-aws-ecs --cluster-name prod --service-name web
    mackerel-plugin-aws-ecs --cluster-name prod -p my-profile -r us-east-1 -f table
    mackerel-plugin-aws-ecs --version

종료 코드:
    0: 조회 1회 완료 (일부/전체 메트릭 실패 포함)
    1: 세션/클라이언트 생성 실패 또는 잘못된 입력

그래프 정의:
    MACKEREL_AGENT_PLUGIN_META 환경변수가 설정되어 있으면
    CloudWatch 조회 없이 그래프 정의만 출력합니다.
"""

import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from core.config import get_version, is_plugin_meta_mode, settings, setup_logging
from core.exceptions import MetricsPluginError
from core.session import create_session, get_client
from plugins.ecs import Scope, build_metric_groups, fetch_snapshot
from shared.aws.metrics import CloudWatchStatisticsQuery
from shared.io import format_definitions, format_values, print_table
from shared.io.mackerel import write_lines

logger = logging.getLogger(__name__)

# 에러 메시지는 stderr (stdout은 agent 출력 전용)
err_console = Console(stderr=True)

OUTPUT_FORMATS = ["mackerel", "json", "table"]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(get_version(), prog_name="mackerel-plugin-aws-ecs")
@click.option("--access-key-id", default=None, help="AWS Access Key ID")
@click.option("--secret-access-key", default=None, help="AWS Secret Access Key")
@click.option("-p", "--profile", default=None, help="AWS 프로파일 (액세스 키 미지정 시)")
@click.option("--cluster-name", required=True, help="ECS 클러스터 이름")
@click.option("--service-name", default="", help="ECS 서비스 이름 (지정 시 서비스 단위 조회)")
@click.option(
    "--metric-key-prefix",
    default=settings.DEFAULT_METRIC_KEY_PREFIX,
    show_default=True,
    help="메트릭 키 prefix",
)
@click.option("-r", "--region", default=None, help="AWS 리전 (기본: 환경변수 → 프로파일 → ap-northeast-2)")
@click.option("-f", "--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default="mackerel")
@click.option("--debug", is_flag=True, help="디버그 로그 출력")
def cli(
    access_key_id: str | None,
    secret_access_key: str | None,
    profile: str | None,
    cluster_name: str,
    service_name: str,
    metric_key_prefix: str,
    region: str | None,
    output_format: str,
    debug: bool,
) -> None:
    """ECS 클러스터/서비스의 CloudWatch 메트릭을 조회하여 출력"""
    setup_logging(debug=debug)

    try:
        scope = Scope(cluster=cluster_name, service=service_name or None)
    except MetricsPluginError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    groups = build_metric_groups(scope, metric_key_prefix)

    if is_plugin_meta_mode():
        write_lines(format_definitions(groups, metric_key_prefix), sys.stdout)
        return

    # 세션 실패는 조회 전에 종료
    try:
        session = create_session(access_key_id, secret_access_key, profile, region)
        cloudwatch = get_client(session, "cloudwatch", max_attempts=1)
    except MetricsPluginError as e:
        logger.error(f"세션 생성 실패: {e}")
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    snapshot = fetch_snapshot(CloudWatchStatisticsQuery(cloudwatch), scope, groups)

    if output_format == "json":
        click.echo(json.dumps(snapshot, ensure_ascii=False, indent=2, sort_keys=True))
    elif output_format == "table":
        print_table(snapshot, groups, title=escape(f"{metric_key_prefix} [{scope}]"))
    else:
        write_lines(format_values(snapshot, groups, metric_key_prefix), sys.stdout)


if __name__ == "__main__":
    cli()
