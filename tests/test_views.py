from viewer.views import group_files_by_directory


def test_document_page(client, docs_root):
    response = client.get("/", {"file": "guide/setup.md"})

    assert response.status_code == 200
    content = response.content.decode()
    assert '<h1 id="setup">Setup</h1>' in content
    assert "<title>Setup - MarkView</title>" in content
    assert 'href="?file=README.md"' in content
    assert 'href="?file=guide%2Ffaq.md"' in content
    assert response.context["error"] is None
    assert response.context["toc"][0]["id"] == "setup"


def test_document_page_defaults_to_readme(client, docs_root):
    response = client.get("/")

    assert response.status_code == 200
    assert response.context["file"] == "README.md"
    assert '<a href="?file=guide%2Fsetup.md">the guide</a>' in response.content.decode()


def test_document_page_missing_file(client, docs_root):
    response = client.get("/", {"file": "../../etc/passwd"})

    assert response.status_code == 404
    content = response.content.decode()
    assert "File Not Found" in content
    assert "<code>etc/passwd</code>" in content
    assert response.context["error"] == "File not found"


def test_document_page_wrong_type(client, docs_root):
    response = client.get("/", {"file": "notes.txt"})

    assert response.status_code == 404
    assert "Only markdown (.md) files are allowed." in response.content.decode()


def test_group_files_by_directory():
    groups = group_files_by_directory(["README.md", "a/x.md", "a/y.md", "b/c/z.md"])

    assert groups == [
        {"folder": "", "files": [{"path": "README.md", "name": "README.md"}]},
        {
            "folder": "a",
            "files": [
                {"path": "a/x.md", "name": "x.md"},
                {"path": "a/y.md", "name": "y.md"},
            ],
        },
        {"folder": "b/c", "files": [{"path": "b/c/z.md", "name": "z.md"}]},
    ]


def test_group_files_without_root_documents():
    assert group_files_by_directory(["a/x.md"]) == [
        {"folder": "a", "files": [{"path": "a/x.md", "name": "x.md"}]}
    ]
