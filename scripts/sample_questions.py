import argparse
import os
import sys

# Add backend to path
sys.path.append(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'backend'))

from core.config import settings
from core.logging import configure_logging
from engines.session import generate_question_dict


def main():
    parser = argparse.ArgumentParser(description="Print sample drill questions for a level")
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--mode", default="adjective", choices=["adjective", "article_drill", "konjunktiv_i"])
    parser.add_argument("--count", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    for i in range(args.count):
        seed = None if args.seed is None else args.seed + i
        q = generate_question_dict({"mode": args.mode}, args.level, seed=seed)
        if q["mode"] == "konjunktiv_i":
            print(f"{q['prompt']}  ->  {q['target']}  options={q['options']}  [{q['expectedForm']}]")
        elif q["mode"] == "article_drill":
            print(f"___ {q['noun']} ({q['nounMeaning']})  [{q['expectedArticle']}]")
        else:
            art = q["expectedArticle"] or "Ø"
            print(f"{q['context']} {art} {q['adjective']}___ {q['noun']}  "
                  f"[{q['case']}/{q['articleClass']}: {art} {q['fullAdjective']}]")


if __name__ == "__main__":
    main()
