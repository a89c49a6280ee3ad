"""Popup and options page sources.

Keyed by (UIFramework, LanguageVariant):

- VANILLA sources register DOM listeners on named elements and read/write a
  storage-backed counter and settings object.
- COMPONENT sources are React component trees with local state, mounted into
  ``#popup-root`` / ``#options-root``.

Bundled sources import their stylesheet; the plain vanilla build is loaded
straight from HTML and links it instead. DIRECT_LOAD_* are the framework-free
scripts copied to the project root for loading without a build step.
"""
from __future__ import annotations

from webext_scaffold.models import LanguageVariant, UIFramework

_Key = tuple[UIFramework, LanguageVariant]

SCRIPT_SUFFIX: dict[LanguageVariant, str] = {
    LanguageVariant.PLAIN: "js",
    LanguageVariant.TYPED: "ts",
}

UI_SUFFIX: dict[_Key, str] = {
    (UIFramework.VANILLA, LanguageVariant.PLAIN): "js",
    (UIFramework.VANILLA, LanguageVariant.TYPED): "ts",
    (UIFramework.COMPONENT, LanguageVariant.PLAIN): "jsx",
    (UIFramework.COMPONENT, LanguageVariant.TYPED): "tsx",
}


# ── Vanilla ──────────────────────────────────────────────────────────────────

_POPUP_VANILLA_JS = """\
// Popup script
document.addEventListener('DOMContentLoaded', () => {
  // Example: Get data from storage
  chrome.storage.local.get(['count'], (result) => {
    const count = result.count || 0;
    document.getElementById('count').textContent = count.toString();
  });

  // Example: Handle button click
  document.getElementById('increment').addEventListener('click', () => {
    chrome.storage.local.get(['count'], (result) => {
      const newCount = (result.count || 0) + 1;
      chrome.storage.local.set({ count: newCount });
      document.getElementById('count').textContent = newCount.toString();
    });
  });
});
"""

_OPTIONS_VANILLA_JS = """\
// Options script
document.addEventListener('DOMContentLoaded', () => {
  // Load saved settings
  chrome.storage.local.get(['settings'], (result) => {
    const settings = result.settings || { enabled: true, theme: 'light' };

    document.getElementById('enabled').checked = settings.enabled;
    document.getElementById('theme').value = settings.theme;
  });

  // Save settings
  document.getElementById('save').addEventListener('click', () => {
    const settings = {
      enabled: document.getElementById('enabled').checked,
      theme: document.getElementById('theme').value
    };

    chrome.storage.local.set({ settings }, () => {
      const status = document.getElementById('status');
      status.textContent = 'Settings saved!';
      setTimeout(() => {
        status.textContent = '';
      }, 1500);
    });
  });
});
"""

_POPUP_VANILLA_TS = """\
// Popup script
import './index.css';

interface CountData {
  count?: number;
}

function showCount(value: number): void {
  const counter = document.getElementById('count') as HTMLSpanElement;
  counter.textContent = value.toString();
}

document.addEventListener('DOMContentLoaded', () => {
  // Example: Get data from storage
  chrome.storage.local.get(['count'], (result: CountData) => {
    showCount(result.count || 0);
  });

  // Example: Handle button click
  const button = document.getElementById('increment') as HTMLButtonElement;
  button.addEventListener('click', () => {
    chrome.storage.local.get(['count'], (result: CountData) => {
      const newCount = (result.count || 0) + 1;
      chrome.storage.local.set({ count: newCount });
      showCount(newCount);
    });
  });
});
"""

_OPTIONS_VANILLA_TS = """\
// Options script
import './index.css';

interface Settings {
  enabled: boolean;
  theme: string;
}

const defaultSettings: Settings = { enabled: true, theme: 'light' };

document.addEventListener('DOMContentLoaded', () => {
  const enabled = document.getElementById('enabled') as HTMLInputElement;
  const theme = document.getElementById('theme') as HTMLSelectElement;
  const save = document.getElementById('save') as HTMLButtonElement;
  const status = document.getElementById('status') as HTMLDivElement;

  // Load saved settings
  chrome.storage.local.get(['settings'], (result: { settings?: Settings }) => {
    const settings = result.settings || defaultSettings;

    enabled.checked = settings.enabled;
    theme.value = settings.theme;
  });

  // Save settings
  save.addEventListener('click', () => {
    const settings: Settings = {
      enabled: enabled.checked,
      theme: theme.value
    };

    chrome.storage.local.set({ settings }, () => {
      status.textContent = 'Settings saved!';
      setTimeout(() => {
        status.textContent = '';
      }, 1500);
    });
  });
});
"""


# ── React ────────────────────────────────────────────────────────────────────

_POPUP_REACT_JSX = """\
import React, { useState, useEffect } from 'react';
import { createRoot } from 'react-dom/client';
import './index.css';

const Popup = () => {
  const [count, setCount] = useState(0);

  useEffect(() => {
    // Example: Get data from storage
    chrome.storage.local.get(['count'], (result) => {
      if (result.count) {
        setCount(result.count);
      }
    });
  }, []);

  const incrementCount = () => {
    const newCount = count + 1;
    setCount(newCount);
    chrome.storage.local.set({ count: newCount });
  };

  return (
    <div className="popup-container">
      <h1>My Extension</h1>
      <p>You clicked {count} times</p>
      <button onClick={incrementCount}>Click me</button>
    </div>
  );
};

createRoot(document.getElementById('popup-root')).render(<Popup />);
"""

_OPTIONS_REACT_JSX = """\
import React, { useState, useEffect } from 'react';
import { createRoot } from 'react-dom/client';
import './index.css';

const Options = () => {
  const [settings, setSettings] = useState({
    enabled: true,
    theme: 'light'
  });

  useEffect(() => {
    // Load settings from storage
    chrome.storage.local.get(['settings'], (result) => {
      if (result.settings) {
        setSettings(result.settings);
      }
    });
  }, []);

  const saveSettings = () => {
    chrome.storage.local.set({ settings });
    alert('Settings saved!');
  };

  return (
    <div className="options-container">
      <h1>Extension Options</h1>

      <div className="option">
        <label>
          <input
            type="checkbox"
            checked={settings.enabled}
            onChange={(e) => setSettings({ ...settings, enabled: e.target.checked })}
          />
          Enable extension
        </label>
      </div>

      <div className="option">
        <label>Theme:</label>
        <select
          value={settings.theme}
          onChange={(e) => setSettings({ ...settings, theme: e.target.value })}
        >
          <option value="light">Light</option>
          <option value="dark">Dark</option>
        </select>
      </div>

      <button onClick={saveSettings}>Save Settings</button>
    </div>
  );
};

createRoot(document.getElementById('options-root')).render(<Options />);
"""

_POPUP_REACT_TSX = """\
import React, { useState, useEffect } from 'react';
import { createRoot } from 'react-dom/client';
import './index.css';

const Popup: React.FC = () => {
  const [count, setCount] = useState<number>(0);

  useEffect(() => {
    // Example: Get data from storage
    chrome.storage.local.get(['count'], (result: { count?: number }) => {
      if (result.count) {
        setCount(result.count);
      }
    });
  }, []);

  const incrementCount = (): void => {
    const newCount = count + 1;
    setCount(newCount);
    chrome.storage.local.set({ count: newCount });
  };

  return (
    <div className="popup-container">
      <h1>My Extension</h1>
      <p>You clicked {count} times</p>
      <button onClick={incrementCount}>Click me</button>
    </div>
  );
};

createRoot(document.getElementById('popup-root') as HTMLElement).render(<Popup />);
"""

_OPTIONS_REACT_TSX = """\
import React, { useState, useEffect } from 'react';
import { createRoot } from 'react-dom/client';
import './index.css';

interface Settings {
  enabled: boolean;
  theme: 'light' | 'dark';
}

const Options: React.FC = () => {
  const [settings, setSettings] = useState<Settings>({
    enabled: true,
    theme: 'light'
  });

  useEffect(() => {
    // Load settings from storage
    chrome.storage.local.get(['settings'], (result: { settings?: Settings }) => {
      if (result.settings) {
        setSettings(result.settings);
      }
    });
  }, []);

  const saveSettings = (): void => {
    chrome.storage.local.set({ settings });
    alert('Settings saved!');
  };

  return (
    <div className="options-container">
      <h1>Extension Options</h1>

      <div className="option">
        <label>
          <input
            type="checkbox"
            checked={settings.enabled}
            onChange={(e: React.ChangeEvent<HTMLInputElement>) =>
              setSettings({ ...settings, enabled: e.target.checked })}
          />
          Enable extension
        </label>
      </div>

      <div className="option">
        <label>Theme:</label>
        <select
          value={settings.theme}
          onChange={(e: React.ChangeEvent<HTMLSelectElement>) =>
            setSettings({ ...settings, theme: e.target.value as Settings['theme'] })}
        >
          <option value="light">Light</option>
          <option value="dark">Dark</option>
        </select>
      </div>

      <button onClick={saveSettings}>Save Settings</button>
    </div>
  );
};

createRoot(document.getElementById('options-root') as HTMLElement).render(<Options />);
"""


POPUP_SOURCE: dict[_Key, str] = {
    (UIFramework.VANILLA, LanguageVariant.PLAIN): _POPUP_VANILLA_JS,
    (UIFramework.VANILLA, LanguageVariant.TYPED): _POPUP_VANILLA_TS,
    (UIFramework.COMPONENT, LanguageVariant.PLAIN): _POPUP_REACT_JSX,
    (UIFramework.COMPONENT, LanguageVariant.TYPED): _POPUP_REACT_TSX,
}

OPTIONS_SOURCE: dict[_Key, str] = {
    (UIFramework.VANILLA, LanguageVariant.PLAIN): _OPTIONS_VANILLA_JS,
    (UIFramework.VANILLA, LanguageVariant.TYPED): _OPTIONS_VANILLA_TS,
    (UIFramework.COMPONENT, LanguageVariant.PLAIN): _OPTIONS_REACT_JSX,
    (UIFramework.COMPONENT, LanguageVariant.TYPED): _OPTIONS_REACT_TSX,
}

DIRECT_LOAD_POPUP = _POPUP_VANILLA_JS
DIRECT_LOAD_OPTIONS = _OPTIONS_VANILLA_JS
