"""File templates written into a new tutorial workspace.

Every ``generate_*`` helper is a pure function: it only renders the constant
templates below and never touches the filesystem.
"""

from __future__ import annotations

from .config import TUTORIALS_DIRNAME
from .metadata import TutorialMetadata
from .template import render_template

__all__ = [
    "DEFAULT_WS_ENDPOINT",
    "GITIGNORE",
    "TSCONFIG",
    "VITEST_CONFIG",
    "generate_e2e_test_stub",
    "generate_justfile",
    "generate_readme",
    "generate_tutorial_metadata",
]


DEFAULT_WS_ENDPOINT = "ws://127.0.0.1:9944"
WS_ENDPOINT_ENV = "POLKADOT_WS"

JUSTFILE_TEMPLATE = """default:
  @just --list

say-hello:
  echo "Hello, world!"
"""

README_TEMPLATE = """# {{ slug }}

Describe the goal, prerequisites, and step-by-step instructions for this tutorial.

## Prerequisites

- Rust `1.86+` (check with `rustc --version`)
- Node.js `20+` (check with `node --version`)
- Basic knowledge of Polkadot SDK

## Steps

1. **Setup environment**
   ```bash
   cd {{ tutorial_dir }}
   npm install
   ```

2. **Build the project**
   ```bash
   # Add your build commands here
   ```

3. **Run tests**
   ```bash
   npm run test
   ```

## Testing

To run the end-to-end tests:

```bash
cd {{ tutorial_dir }}
npm run test
```

## Next Steps

- Add your implementation code to `{{ code_dir }}/`
- Write comprehensive tests in `tests/`
- Update this README with detailed instructions
"""

TUTORIAL_YML_TEMPLATE = """name: {{ metadata.name }}
slug: {{ metadata.slug }}
category: {{ metadata.category }}
needs_node: {{ metadata.needs_node|lower }}
description: {{ metadata.description }}
type: {{ metadata.type.value }} # or contracts
"""

E2E_TEST_TEMPLATE = """import { describe, it, expect } from 'vitest';
import { ApiPromise, WsProvider } from '@polkadot/api';
import net from 'node:net';

async function isPortReachable(host: string, port: number, timeoutMs: number): Promise<boolean> {
  return new Promise((resolve) => {
    const socket = new net.Socket();
    const done = (ok: boolean) => { try { socket.destroy(); } catch {} ; resolve(ok); };
    socket.setTimeout(timeoutMs);
    socket.once('error', () => done(false));
    socket.once('timeout', () => done(false));
    socket.connect(port, host, () => done(true));
  });
}

describe('{{ slug }} e2e', () => {
  it('connects and reads chain info', async () => {
    const endpoint = process.env.{{ env_var }} || '{{ endpoint }}';
    const { hostname, port } = new URL(endpoint.replace('ws://', 'http://'));
    if (!(await isPortReachable(hostname, Number(port || 9944), 1000))) {
      console.log('⏭️  Skipping test - node not available');
      return;
    }

    const api = await ApiPromise.create({ provider: new WsProvider(endpoint, 1) });
    const header = await api.rpc.chain.getHeader();
    expect(header.number.toNumber()).toBeGreaterThanOrEqual(0);
    await api.disconnect();
  });
});
"""

GITIGNORE = """node_modules/
dist/
*.log
.DS_Store
coverage/
"""

VITEST_CONFIG = """import { defineConfig } from 'vitest/config';
export default defineConfig({
  test: {
    include: ['tests/**/*.test.ts'],
    testTimeout: 30000,
    hookTimeout: 30000,
  },
});
"""

TSCONFIG = """{
  "compilerOptions": {
    "target": "ES2020",
    "module": "ESNext",
    "moduleResolution": "Bundler",
    "types": ["node", "vitest/globals"],
    "esModuleInterop": true,
    "resolveJsonModule": true,
    "skipLibCheck": true
  },
  "include": ["tests/**/*.ts"]
}
"""


def generate_justfile() -> str:
    """Return the justfile shipped with every tutorial."""

    return JUSTFILE_TEMPLATE


def generate_readme(slug: str) -> str:
    context = {
        "slug": slug,
        "tutorial_dir": f"{TUTORIALS_DIRNAME}/{slug}",
        "code_dir": f"{slug}-code",
    }
    return render_template(README_TEMPLATE, context)


def generate_tutorial_metadata(slug: str, title: str) -> str:
    """Return the ``tutorial.yml`` body with placeholder description and category."""

    metadata = TutorialMetadata.for_slug(slug, title)
    return render_template(TUTORIAL_YML_TEMPLATE, {"metadata": metadata})


def generate_e2e_test_stub(slug: str) -> str:
    """Return a vitest suite that reads the chain header from a local node.

    The suite returns early instead of failing when nothing listens on the
    endpoint taken from ``POLKADOT_WS``.
    """

    context = {"slug": slug, "env_var": WS_ENDPOINT_ENV, "endpoint": DEFAULT_WS_ENDPOINT}
    return render_template(E2E_TEST_TEMPLATE, context)
