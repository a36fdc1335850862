"""Tagged dataclass

Fields carry a tag through :func:`flagbind.tag`; :func:`flagbind.cli` binds the command
line onto an instance, then runs a spinner until we stop it.

Usage:

    python ./01_tagged_dataclass.py -h
    python ./01_tagged_dataclass.py -u=alice -p=secret -m=global -v -P=1080
    python ./01_tagged_dataclass.py -u=alice -p=secret

"""

import dataclasses
import sys
import time

import flagbind


@dataclasses.dataclass
class Params:
    user: str = flagbind.tag("u", usage="User name", require="true", default="")
    password: str = flagbind.tag("p", usage="Password", require="true", default="")
    local_port: int = flagbind.tag("P", usage="Local port", type="int", default=1080)
    mode: str = flagbind.tag(
        "m",
        usage="Routing mode",
        require="true",
        type="option",
        options="global:Proxy everything,rule:Follow rules,auto:Detect",
        default="",
    )
    verbose: bool = flagbind.tag("v", usage="Verbose output", type="bool", default=False)


if __name__ == "__main__":
    params = Params()
    result = flagbind.cli(
        params, usage_title="usage: proxy [flags]", loading_title="connecting "
    )
    if not result:
        sys.exit(2)

    time.sleep(2.0)
    result.stop_loading()
    print(params)
