"""CLI 命令列工具

在終端機查看今天的日期、農曆月、公曆月與農曆年的月份序列。
"""

import click

from xiali.constants import GREGORIAN_MONTHS, WEEKDAYS
from xiali.exceptions import InvalidDateError
from xiali.services.calendar import get_calendar_service


@click.group()
def cli():
    """夏曆 CLI 工具"""
    pass


@cli.command()
def today():
    """顯示今天的農曆與公曆日期"""
    service = get_calendar_service()
    lunar = service.get_current_lunar_date()
    gregorian = service.get_current_gregorian_date()

    month_name = service.get_chinese_month_name(lunar.month, lunar.is_leap_month)
    click.echo(f"公曆: {gregorian.year}-{gregorian.month:02d}-{gregorian.day:02d}")
    click.echo(
        f"農曆: {service.get_chinese_year_name(lunar.year)} "
        f"{month_name} 第 {lunar.day} 天"
    )
    click.echo(service.get_huangdi_year(lunar.year))


@cli.command()
@click.argument("year", type=int)
@click.argument("month", type=click.IntRange(1, 12))
@click.option("--leap", is_flag=True, help="查詢閏月")
def lunar(year: int, month: int, leap: bool):
    """列出農曆 YEAR 年 MONTH 月的每一天"""
    service = get_calendar_service()
    try:
        days = service.get_lunar_month(year, month, leap)
    except InvalidDateError as e:
        raise click.ClickException(e.message)

    click.echo(
        f"{service.get_chinese_year_name(year)} "
        f"{service.get_chinese_month_name(month, leap)}"
    )
    for day in days:
        extra = " ".join(x for x in (day.holiday, day.jie_qi) if x)
        click.echo(
            f"  {day.lunar_day_name}  "
            f"{day.gregorian_year}-{day.gregorian_month:02d}-{day.gregorian_day:02d}"
            + (f"  {extra}" if extra else "")
        )


@cli.command()
@click.argument("year", type=int)
@click.argument("month", type=click.IntRange(1, 12))
def gregorian(year: int, month: int):
    """以週曆格式顯示公曆 YEAR 年 MONTH 月"""
    service = get_calendar_service()
    try:
        days = service.get_gregorian_month(year, month)
    except InvalidDateError as e:
        raise click.ClickException(e.message)

    click.echo(f"{year}年 {GREGORIAN_MONTHS[month - 1]}")
    click.echo("".join(f"{w:^8}" for w in WEEKDAYS))
    for start in range(0, len(days), 7):
        week = days[start:start + 7]
        cells = []
        for day in week:
            if day.empty:
                cells.append(" " * 8)
            else:
                cells.append(f"{day.gregorian_day:>2} {day.label}".ljust(8))
        click.echo("".join(cells).rstrip())


@cli.command()
@click.argument("year", type=int)
def months(year: int):
    """列出農曆 YEAR 年的月份（含閏月）"""
    service = get_calendar_service()
    try:
        month_list = service.get_months_in_year(year)
        year_name = service.get_chinese_year_name(year)
    except InvalidDateError as e:
        raise click.ClickException(e.message)

    click.echo(f"{year_name} 共 {len(month_list)} 個月")
    for m in month_list:
        click.echo(f"  {service.get_chinese_month_name(m.month, m.is_leap_month)}")


if __name__ == "__main__":
    cli()
