"""
Basic Optional usage: construction, combinators and fallbacks.

Run: python examples/basic_optional.py
"""
from optionalpy import of, of_nullable, empty, IllegalState


def lookup(users: dict, name: str):
    return of_nullable(users.get(name))


def main():
    users = {"ada": {"email": "ada@example.com"}, "bob": {}}

    # map collapses a None result to empty
    for name in ("ada", "bob", "eve"):
        email = lookup(users, name).map(lambda u: u.get("email")).or_else("<none>")
        print(f"{name}: {email}")

    print(of(42).map(lambda x: x * 2).or_else(0))
    print(of(1).flat_map(lambda x: of(x + 1)).get())
    print(of("a").filter(lambda s: len(s) > 1).is_present)

    of_nullable(None).if_present_or_else(print, lambda: print("ranEmpty"))

    try:
        empty().get()
    except IllegalState as e:
        print(f"get() on empty: {e}")


if __name__ == "__main__":
    main()
