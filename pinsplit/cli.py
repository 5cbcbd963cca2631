"""
pinsplit 命令行工具
"""

import argparse
import sys

import orjson

from pinsplit.engine import STRATEGIES, InvalidConfig, SplitterConfig, create_splitter, get_logger


def _read_text(args) -> str:
    """参数优先，否则读取标准输入"""
    if args.text:
        return " ".join(args.text)
    return sys.stdin.read()


def _build_splitter(args):
    config = SplitterConfig(
        boundary_marker=args.marker,
        strategy=args.strategy,
        correct_overfetch=not args.no_overfetch,
        resuffix_tone_digits=not args.no_resuffix,
    )
    return create_splitter(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pinsplit",
        description="pinsplit - 汉语拼音音节切分",
    )

    # 切分相关的公共参数
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("text", nargs="*", help="拼音文本（省略时读取标准输入）")
    common.add_argument("-s", "--strategy", choices=STRATEGIES, default="pattern", help="切分策略 (默认: pattern)")
    common.add_argument("-m", "--marker", default="∙", help="音节分隔符 (默认: ∙)")
    common.add_argument("--no-overfetch", action="store_true", help="关闭词典策略的过切纠正")
    common.add_argument("--no-resuffix", action="store_true", help="关闭数字声调回贴")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    subparsers.add_parser("split", parents=[common], help="输出带分隔符的文本")
    subparsers.add_parser("tag", parents=[common], help="输出带标签的词元（每行一个 JSON）")
    subparsers.add_parser("syllables", parents=[common], help="每行输出一个音节")

    # serve 命令
    serve_parser = subparsers.add_parser("serve", help="启动 API 服务")
    serve_parser.add_argument("--host", default="0.0.0.0", help="绑定地址 (默认: 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=3000, help="端口 (默认: 3000)")

    # version 命令
    subparsers.add_parser("version", help="显示版本")

    return parser


def main(argv=None) -> int:
    """命令行入口"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in ("split", "tag", "syllables"):
        try:
            splitter = _build_splitter(args)
        except InvalidConfig as e:
            get_logger("pinsplit.cli").error(f"配置无效: {e}")
            return 2

        text = _read_text(args)

        if args.command == "split":
            sys.stdout.write(splitter.split_text(text))
            if not text.endswith("\n"):
                sys.stdout.write("\n")
        elif args.command == "tag":
            for token in splitter.tag_text(text):
                print(orjson.dumps(token.to_dict()).decode("utf-8"))
        else:
            for syllable in splitter.list_syllables(text):
                print(syllable)
        return 0

    if args.command == "serve":
        from pinsplit.api.server import main as server_main
        import os
        os.environ["HOST"] = args.host
        os.environ["PORT"] = str(args.port)
        server_main()
        return 0

    if args.command == "version":
        from pinsplit import __version__
        print(f"pinsplit v{__version__}")
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
