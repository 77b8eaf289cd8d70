import pytest

from eptolite import spec

# --- Flat specs ------------------------------------------------------------- #


def test_parse_flat_spec():
    s = spec.OptionSpec.parse("aVE:")
    assert s.letters() == ["a", "V", "E"]
    assert s.lookup("E").takesValue
    assert not s.lookup("a").takesValue
    assert s.flatten() == "aVE:"


def test_parse_flat_spec_rejects_garbage():
    with pytest.raises(ValueError):
        spec.OptionSpec.parse("a-b")

    with pytest.raises(ValueError):
        spec.OptionSpec.parse(":a")


def test_duplicate_letters_keep_first_position():
    s = spec.OptionSpec.parse("abA:a:")
    assert s.flatten() == "a:bA:"


def test_merge():
    s = spec.OptionSpec.parse("aD").merge(spec.OptionSpec.parse("A:DF:vV"))
    assert s.flatten() == "aDA:F:vV"


# --- Derivation ------------------------------------------------------------- #


def test_derive_full_syntax():
    s = spec.deriveSpec(
        "prog [-aDgvVX] [-A logfile] [-E errorlevel] [-F logfile] file"
    )
    assert s.flatten() == "aDgvVXA:E:F:"


def test_derive_without_progname():
    assert spec.deriveSpec("[-aV] [-E level] file").flatten() == "aVE:"


def test_derive_end_to_end_example():
    assert spec.deriveSpec("prog [-aV] [-E level] file").flatten() == "aVE:"


def test_derive_ignores_after_double_dash():
    assert spec.deriveSpec("prog [-a] -- [-b] [-c value]").flatten() == "a"


def test_derive_trims_inside_brackets():
    assert spec.deriveSpec("prog [ -ab ] [  -C  file  ]").flatten() == "abC:"


def test_derive_drops_non_option_groups():
    assert spec.deriveSpec("prog [-a] [file] [more files] args").flatten() == "a"


def test_derive_drops_non_letter_groups():
    assert spec.deriveSpec("prog [-a] [-1] [-?] [-]").flatten() == "a"


def test_derive_filler_between_groups():
    assert spec.deriveSpec("prog [-a] src dst [-b] or [-c]").flatten() == "abc"


def test_derive_no_options():
    assert len(spec.deriveSpec("prog file...")) == 0
    assert len(spec.deriveSpec("")) == 0


def test_derive_program_name_only():
    assert len(spec.deriveSpec("myscript", "myscript")) == 0
    assert len(spec.deriveSpec("myscript", "/usr/bin/myscript.py")) == 0
    assert spec.deriveSpec("myscript").flatten() == "myscript"


def test_derive_unclosed_group():
    assert spec.deriveSpec("prog [-ab").flatten() == "ab"


def test_derive_cluster_with_placeholder_marks_last_letter():
    assert spec.deriveSpec("prog [-ab value]").flatten() == "ab:"


@pytest.mark.parametrize(
    "usage",
    [
        "prog [-aDgvVX] [-A logfile] [-E errorlevel] [-F logfile] file",
        "[-x] [-y value] a b c",
        "prog file",
        "prog [-q] -- [-z]",
    ],
)
def test_derive_is_idempotent(usage):
    derived = spec.deriveSpec(usage)
    assert spec.deriveSpec(derived.flatten()) == derived


def test_looks_like_syntax():
    assert spec.looksLikeSyntax("  [-a] file")
    assert not spec.looksLikeSyntax("prog [-a] file")
