from json import dumps

import pyperf

from chomp import View, literal, parse
from tests.parsers.json import json

DATA = dumps({"key_" + str(n): list(range(100)) for n in range(1000)})
REPEAT = "a" * 100000

many_a = literal("a").one_or_more().fmap(lambda v: [len(v)])

runner = pyperf.Runner()
runner.bench_func("json_parser", lambda: parse(json, View(DATA)).unwrap())
runner.bench_func(
    "one_or_more_view", lambda: parse(many_a, View(REPEAT)).unwrap()
)
