from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write, write_source_file
from tests.infrastructure.parser_utils import is_tree_sitter_available


@pytest.fixture
def skip_if_no_tree_sitter():
    """Skip test if Tree-sitter is not available."""
    if not is_tree_sitter_available():
        pytest.skip("Tree-sitter not available")


@pytest.fixture
def tsproj(tmp_path: Path):
    """Small project: one clean file, one broken file, one ignored file."""
    root = tmp_path
    write_source_file(root / "src" / "good.ts", """
        import * as fs from 'fs';
        import { join } from 'path';

        import { config } from '../../config';
        import { helper } from '../helpers';

        import { Widget } from './widget';
        import './styles';

        export const x = join(fs.realpathSync('.'), config, helper, Widget);
    """)
    write_source_file(root / "src" / "bad.ts", """
        import { Widget } from './widget';
        import React from 'react';
        import { helper } from './../helpers/index';
    """)
    write_source_file(root / "build" / "out.js", """
        import a from './a';
        import b from 'b';
    """)
    write(root / ".gitignore", "build/\n")
    write(root / "README.md", "# not checked\n")
    return root
