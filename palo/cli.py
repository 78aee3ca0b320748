# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
import argparse
from palo import log as ops_log
from palo.config import get_cfg, reload_cfg
from palo.errors import ChangelogError
from palo.log import ops_event, reconfigure
from palo.service import run_generate, run_release, run_verify

# tests swap this for an in-memory source; None means "from config"
source = None

@ops_event("generate")
def cmd_generate(args):
    run_generate(get_cfg(), source)

@ops_event("release")
def cmd_release(args):
    run_release(get_cfg(), source)

@ops_event("verify")
def cmd_verify(args):
    run_verify(get_cfg(), source)
    ops_log.get_logger().info("changelog is consistent with git tags")

def main_cli(argv=None):
    p = argparse.ArgumentParser(prog="palo")
    p.add_argument("--config", help="YAML config file (default: $PATCHLOG_CONFIG or ./patchlog.yml)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_generate = sub.add_parser("generate", help="regenerate the unreleased section")
    p_generate.set_defaults(func=cmd_generate)

    p_release = sub.add_parser("release", help="generate, then date the released section")
    p_release.set_defaults(func=cmd_release)

    p_verify = sub.add_parser("verify", help="check changelog versions against git tags")
    p_verify.set_defaults(func=cmd_verify)

    args = p.parse_args(argv)
    if args.config:
        reload_cfg(args.config)
        reconfigure()
    log = ops_log.get_logger()
    log.debug("config: %s", get_cfg().snapshot())
    ops_log.configure(get_cfg().get("log.ops"))
    try:
        args.func(args)
    except ChangelogError as e:
        log.error("%s", e.message)
        if e.suggestion:
            log.error("%s", e.suggestion)
        log.error("exiting with error")
        return 1
    finally:
        ops_log.close()
    return 0

if __name__ == "__main__":
    raise SystemExit(main_cli())
