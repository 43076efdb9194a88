"""Run every pattern demo in turn."""

from design_patterns.creational import builder, factory, prototype, singleton
from design_patterns.structural import decorator

DEMOS = [
    ("Builder", builder.main),
    ("Factory", factory.main),
    ("Prototype", prototype.main),
    ("Singleton", singleton.main),
    ("Decorator", decorator.main),
]


def main() -> None:
    for index, (title, demo) in enumerate(DEMOS):
        if index:
            print()
        print(f"== {title} ==")
        demo()


if __name__ == "__main__":
    main()
