"""Shared fixtures and helpers for brand-ui tests."""

import json
import os

import pytest

from fake_scaffold_runner import FakeScaffoldRunner

SHADCN_CONFIG = {
    "$schema": "https://ui.shadcn.com/schema.json",
    "style": "default",
    "rsc": True,
    "tsx": True,
    "tailwind": {
        "config": "tailwind.config.ts",
        "css": "src/app/globals.css",
        "baseColor": "slate",
        "cssVariables": True,
    },
    "aliases": {
        "utils": "@/lib/utils",
        "components": "@/components",
    },
}

GENERATED_BUTTON = '''import * as React from "react"
import { cn } from "src/lib/utils"

export interface ButtonProps extends React.ButtonHTMLAttributes<HTMLButtonElement> {}

export function Button({ className, ...props }: ButtonProps) {
  return <button className={cn("inline-flex", className)} {...props} />
}
'''


def read_json(path):
    with open(path) as f:
        return json.load(f)


def write_json(path, data):
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def write_shadcn_config(project_dir, components_alias="@/components"):
    """Write components.json the way `shadcn init` leaves it."""
    config = json.loads(json.dumps(SHADCN_CONFIG))
    config["aliases"]["components"] = components_alias
    write_json(os.path.join(project_dir, "components.json"), config)


def write_project_config(project_dir, base_dir="@/components/base", brand_dir="@/components/brand"):
    write_json(
        os.path.join(project_dir, ".brand-uirc.json"),
        {"baseDir": base_dir, "brandDir": brand_dir},
    )


def write_generated_component(project_dir, name, content=GENERATED_BUTTON):
    """Create the file shadcn would generate in the temporary scaffold directory."""
    ui_dir = os.path.join(project_dir, "src", "components", "ui")
    os.makedirs(ui_dir, exist_ok=True)
    with open(os.path.join(ui_dir, f"{name}.tsx"), "w") as f:
        f.write(content)


def snapshot_tree(root):
    """Map every file path under *root* to its contents."""
    files = {}
    for dirpath, _, filenames in os.walk(root):
        for filename in filenames:
            path = os.path.join(dirpath, filename)
            with open(path) as f:
                files[os.path.relpath(path, root)] = f.read()
    return files


@pytest.fixture
def project(tmp_path, monkeypatch):
    """An empty project directory that is also the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def initialized_project(project):
    """A project in the state `brand-ui init` leaves it."""
    write_shadcn_config(project, components_alias="@/components/base")
    write_project_config(project)
    os.makedirs(project / "src" / "components" / "base")
    os.makedirs(project / "src" / "components" / "brand")
    return project


@pytest.fixture
def fake_runner():
    return FakeScaffoldRunner()
