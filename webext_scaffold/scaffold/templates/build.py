"""Build tooling templates: package.json, webpack.config.js and tsconfig.json.

Dependency sets and loader rules are looked up per axis (language variant,
UI framework) and merged in a fixed order so the output is reproducible.
"""
from __future__ import annotations

from string import Template

from webext_scaffold.models import (
    EXTENSION_DESCRIPTION,
    EXTENSION_VERSION,
    Configuration,
    LanguageVariant,
    UIFramework,
)

from .ui import SCRIPT_SUFFIX, UI_SUFFIX

# ─────────────────────────────────────────────────────────────────────────────
# package.json
# ─────────────────────────────────────────────────────────────────────────────

_BASE_DEV_DEPENDENCIES: dict[str, str] = {
    "@babel/core": "^7.22.5",
    "@babel/preset-env": "^7.22.5",
    "babel-loader": "^9.1.2",
    "copy-webpack-plugin": "^11.0.0",
    "css-loader": "^6.8.1",
    "eslint": "^8.42.0",
    "html-webpack-plugin": "^5.5.3",
    "rimraf": "^5.0.1",
    "style-loader": "^3.3.3",
    "webpack": "^5.86.0",
    "webpack-cli": "^5.1.4",
}

_LANGUAGE_DEV_DEPENDENCIES: dict[LanguageVariant, dict[str, str]] = {
    LanguageVariant.PLAIN: {},
    LanguageVariant.TYPED: {
        "@types/chrome": "^0.0.237",
        "ts-loader": "^9.4.3",
        "typescript": "^5.1.3",
    },
}

_FRAMEWORK_DEPENDENCIES: dict[UIFramework, dict[str, str]] = {
    UIFramework.VANILLA: {},
    UIFramework.COMPONENT: {
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
    },
}

_FRAMEWORK_DEV_DEPENDENCIES: dict[UIFramework, dict[str, str]] = {
    UIFramework.VANILLA: {},
    UIFramework.COMPONENT: {"@babel/preset-react": "^7.22.5"},
}

# React typings are only needed when both axes are switched on.
_FRAMEWORK_TYPINGS: dict[tuple[UIFramework, LanguageVariant], dict[str, str]] = {
    (UIFramework.COMPONENT, LanguageVariant.TYPED): {
        "@types/react": "^18.2.12",
        "@types/react-dom": "^18.2.5",
    },
}


def source_suffixes(config: Configuration) -> list[str]:
    """Distinct source suffixes in the order they appear in the tree."""
    script = SCRIPT_SUFFIX[config.language_variant]
    ui = UI_SUFFIX[(config.ui_framework, config.language_variant)]
    return [script] if script == ui else [script, ui]


def lint_glob(config: Configuration) -> str:
    suffixes = source_suffixes(config)
    if len(suffixes) == 1:
        return f"src/**/*.{suffixes[0]}"
    return "src/**/*.{" + ",".join(suffixes) + "}"


def build_package_json(config: Configuration) -> dict:
    dev_dependencies = dict(_BASE_DEV_DEPENDENCIES)
    dev_dependencies.update(_LANGUAGE_DEV_DEPENDENCIES[config.language_variant])
    dev_dependencies.update(_FRAMEWORK_DEV_DEPENDENCIES[config.ui_framework])
    dev_dependencies.update(
        _FRAMEWORK_TYPINGS.get((config.ui_framework, config.language_variant), {})
    )
    return {
        "name": config.project_name,
        "version": EXTENSION_VERSION,
        "description": EXTENSION_DESCRIPTION,
        "scripts": {
            "clean": "rimraf dist",
            "dev": "webpack --mode=development --watch",
            "build": "npm run clean && webpack --mode=production",
            "setup": "npm install && npm run build && node scripts/setup-instructions.js",
            "lint": f"eslint {lint_glob(config)}",
            "test": 'echo "Error: no test specified" && exit 1',
        },
        "keywords": ["chrome", "extension", "browser"],
        "author": "",
        "license": "MIT",
        "devDependencies": dev_dependencies,
        "dependencies": dict(_FRAMEWORK_DEPENDENCIES[config.ui_framework]),
    }


# ─────────────────────────────────────────────────────────────────────────────
# webpack.config.js
# ─────────────────────────────────────────────────────────────────────────────

# "$$" is a literal "$" for string.Template.
_WEBPACK = Template("""\
const path = require('path');
const CopyPlugin = require('copy-webpack-plugin');
const HtmlWebpackPlugin = require('html-webpack-plugin');

// This webpack configuration builds the extension into the dist/ directory.
// You MUST run 'npm run build' or 'npm run dev' before loading the extension in Chrome.
// When loading the extension in Chrome, select the dist/ directory, NOT the src/ directory.

module.exports = {
  entry: {
    popup: path.join(__dirname, 'src', 'popup', 'index.$ui_suffix'),
    options: path.join(__dirname, 'src', 'options', 'index.$ui_suffix'),
    background: path.join(__dirname, 'src', 'background', 'index.$script_suffix'),
    content: path.join(__dirname, 'src', 'content', 'index.$script_suffix'),
  },
  output: {
    path: path.join(__dirname, 'dist'),
    filename: '[name].js',
  },
  module: {
    rules: [
      {
        test: /\\.css$$/,
        use: ['style-loader', 'css-loader'],
      },
      {
        test: $babel_test,
        exclude: /node_modules/,
        use: {
          loader: 'babel-loader',
          options: {
            presets: [$babel_presets],
          },
        },
      },
$extra_rules    ],
  },
  plugins: [
    new CopyPlugin({
      patterns: [
        { from: 'src/manifest.json', to: 'manifest.json' },
        { from: 'src/assets', to: 'assets' },
      ],
    }),
    new HtmlWebpackPlugin({
      template: path.join(__dirname, 'src', 'popup', 'index.html'),
      filename: 'popup.html',
      chunks: ['popup'],
    }),
    new HtmlWebpackPlugin({
      template: path.join(__dirname, 'src', 'options', 'index.html'),
      filename: 'options.html',
      chunks: ['options'],
    }),
  ],
  resolve: {
    extensions: [$resolve_extensions],
  },
};
""")

_BABEL_TEST: dict[UIFramework, str] = {
    UIFramework.VANILLA: r"/\.js$/",
    UIFramework.COMPONENT: r"/\.jsx?$/",
}

_BABEL_PRESETS: dict[UIFramework, list[str]] = {
    UIFramework.VANILLA: ["@babel/preset-env"],
    UIFramework.COMPONENT: ["@babel/preset-env", "@babel/preset-react"],
}

_TS_RULE = """\
      {
        test: /\\.tsx?$/,
        use: 'ts-loader',
        exclude: /node_modules/,
      },
"""

_EXTRA_RULES: dict[LanguageVariant, str] = {
    LanguageVariant.PLAIN: "",
    LanguageVariant.TYPED: _TS_RULE,
}

_RESOLVE_EXTENSIONS: dict[tuple[UIFramework, LanguageVariant], list[str]] = {
    (UIFramework.VANILLA, LanguageVariant.PLAIN): [".js"],
    (UIFramework.VANILLA, LanguageVariant.TYPED): [".js", ".ts"],
    (UIFramework.COMPONENT, LanguageVariant.PLAIN): [".js", ".jsx"],
    (UIFramework.COMPONENT, LanguageVariant.TYPED): [".js", ".jsx", ".ts", ".tsx"],
}


def _js_list(items: list[str]) -> str:
    return ", ".join(f"'{item}'" for item in items)


def build_webpack_config(config: Configuration) -> str:
    key = (config.ui_framework, config.language_variant)
    return _WEBPACK.substitute(
        ui_suffix=UI_SUFFIX[key],
        script_suffix=SCRIPT_SUFFIX[config.language_variant],
        babel_test=_BABEL_TEST[config.ui_framework],
        babel_presets=_js_list(_BABEL_PRESETS[config.ui_framework]),
        extra_rules=_EXTRA_RULES[config.language_variant],
        resolve_extensions=_js_list(_RESOLVE_EXTENSIONS[key]),
    )


# ─────────────────────────────────────────────────────────────────────────────
# tsconfig.json
# ─────────────────────────────────────────────────────────────────────────────

_TS_JSX_MODE: dict[UIFramework, str] = {
    UIFramework.VANILLA: "preserve",
    UIFramework.COMPONENT: "react",
}


def build_tsconfig(config: Configuration) -> dict:
    return {
        "compilerOptions": {
            "target": "es6",
            "module": "commonjs",
            "jsx": _TS_JSX_MODE[config.ui_framework],
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "outDir": "./dist",
            "rootDir": "./src",
            "typeRoots": ["./node_modules/@types"],
        },
        "include": ["src/**/*"],
        "exclude": ["node_modules", "dist"],
    }
