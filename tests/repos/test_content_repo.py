from content_store.repos.content_repo import FileContentRepo


def write(path, text="---\ntitle: x\n---\n"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_list_content_files_recurses_and_filters(tmp_path):
    root = tmp_path / "blog"
    write(root / "first.md")
    write(root / "2024" / "second.md")
    write(root / "notes.txt")
    write(root / ".drafts" / "hidden.md")
    repo = FileContentRepo(root)

    result = [repo.slug_for(p) for p in repo.list_content_files()]

    assert result == ["2024/second", "first"]


def test_checklist_inside_content_dir_is_not_a_post(tmp_path):
    root = tmp_path / "blog"
    write(root / "post.md")
    checklist = write(root / "seo-checklist.md", "- [x] done\n")
    repo = FileContentRepo(root, checklist)

    assert [repo.slug_for(p) for p in repo.list_content_files()] == ["post"]
    assert repo.read_checklist() == "- [x] done\n"


def test_missing_content_dir_lists_nothing(tmp_path):
    repo = FileContentRepo(tmp_path / "nope", tmp_path / "missing.md")

    assert repo.list_content_files() == []
    assert repo.read_checklist() is None


def test_read_text_drops_byte_order_mark(tmp_path):
    path = tmp_path / "bom.md"
    path.write_bytes("\ufeff---\ntitle: x\n---\n".encode("utf-8"))
    repo = FileContentRepo(tmp_path)

    assert repo.read_text(path).startswith("---")
