"""Background and content script templates.

Keyed by LanguageVariant (body) and ManifestVersion (background header).
The direct-load copies at the project root always use the PLAIN bodies.
"""
from __future__ import annotations

from webext_scaffold.models import LanguageVariant, ManifestVersion

BACKGROUND_HEADER: dict[ManifestVersion, str] = {
    ManifestVersion.V3: "// Background script\n// Service worker for Manifest V3\n",
    ManifestVersion.V2: "// Background script\n// Background page for Manifest V2\n",
}

_BACKGROUND_JS = """\

// Example: Listen for installation
chrome.runtime.onInstalled.addListener(() => {
  console.log('Extension installed');

  // Initialize storage with default values
  chrome.storage.local.set({ count: 0 });
});

// Example: Listen for messages from content scripts or popup
chrome.runtime.onMessage.addListener((message, sender, sendResponse) => {
  if (message.type === 'GET_COUNT') {
    chrome.storage.local.get(['count'], (result) => {
      sendResponse({ count: result.count || 0 });
    });
    return true; // Required for async sendResponse
  }
});
"""

_BACKGROUND_TS = """\

// Chrome API types are provided by the @types/chrome dev dependency

interface StorageData {
  count?: number;
}

interface ExtensionMessage {
  type: string;
  [key: string]: unknown;
}

// Example: Listen for installation
chrome.runtime.onInstalled.addListener(() => {
  console.log('Extension installed');

  // Initialize storage with default values
  chrome.storage.local.set({ count: 0 });
});

// Example: Listen for messages from content scripts or popup
chrome.runtime.onMessage.addListener((message: ExtensionMessage, _sender, sendResponse) => {
  if (message.type === 'GET_COUNT') {
    chrome.storage.local.get(['count'], (result: StorageData) => {
      sendResponse({ count: result.count || 0 });
    });
    return true; // Required for async sendResponse
  }
  return false;
});
"""

BACKGROUND_BODY: dict[LanguageVariant, str] = {
    LanguageVariant.PLAIN: _BACKGROUND_JS,
    LanguageVariant.TYPED: _BACKGROUND_TS,
}

_CONTENT_JS = """\
// Content script
// This script runs on web pages that match the pattern in manifest.json

console.log('Content script loaded');

// Example: Modify page content
function modifyPage() {
  const extensionBanner = document.createElement('div');
  extensionBanner.style.cssText = `
    position: fixed;
    top: 0;
    left: 0;
    width: 100%;
    background-color: #4285f4;
    color: white;
    padding: 10px;
    text-align: center;
    z-index: 9999;
    font-family: Arial, sans-serif;
    display: none;
  `;
  extensionBanner.textContent = 'This page is being enhanced by My Extension';
  document.body.appendChild(extensionBanner);

  // Show the banner briefly then fade out
  setTimeout(() => {
    extensionBanner.style.display = 'block';
    setTimeout(() => {
      extensionBanner.style.opacity = '0';
      extensionBanner.style.transition = 'opacity 1s';
      setTimeout(() => {
        extensionBanner.remove();
      }, 1000);
    }, 3000);
  }, 1000);
}

// Example: Send a message to the background script
function sendMessageToBackground() {
  chrome.runtime.sendMessage({ type: 'CONTENT_LOADED', url: window.location.href },
    (response) => {
      console.log('Response from background:', response);
    }
  );
}

// Run when the page is fully loaded
document.addEventListener('DOMContentLoaded', () => {
  modifyPage();
  sendMessageToBackground();
});

// Listen for messages from the background script
chrome.runtime.onMessage.addListener((message, sender, sendResponse) => {
  if (message.type === 'UPDATE_CONTENT') {
    console.log('Received update request from background');
    sendResponse({ success: true });
  }
  return true;
});
"""

_CONTENT_TS = """\
// Content script
// This script runs on web pages that match the pattern in manifest.json

interface ExtensionMessage {
  type: string;
  [key: string]: unknown;
}

console.log('Content script loaded');

// Example: Modify page content
function modifyPage(): void {
  const extensionBanner: HTMLDivElement = document.createElement('div');
  extensionBanner.style.cssText = `
    position: fixed;
    top: 0;
    left: 0;
    width: 100%;
    background-color: #4285f4;
    color: white;
    padding: 10px;
    text-align: center;
    z-index: 9999;
    font-family: Arial, sans-serif;
    display: none;
  `;
  extensionBanner.textContent = 'This page is being enhanced by My Extension';
  document.body.appendChild(extensionBanner);

  // Show the banner briefly then fade out
  setTimeout(() => {
    extensionBanner.style.display = 'block';
    setTimeout(() => {
      extensionBanner.style.opacity = '0';
      extensionBanner.style.transition = 'opacity 1s';
      setTimeout(() => {
        extensionBanner.remove();
      }, 1000);
    }, 3000);
  }, 1000);
}

// Example: Send a message to the background script
function sendMessageToBackground(): void {
  chrome.runtime.sendMessage({ type: 'CONTENT_LOADED', url: window.location.href },
    (response: unknown) => {
      console.log('Response from background:', response);
    }
  );
}

// Run when the page is fully loaded
document.addEventListener('DOMContentLoaded', () => {
  modifyPage();
  sendMessageToBackground();
});

// Listen for messages from the background script
chrome.runtime.onMessage.addListener((message: ExtensionMessage, _sender, sendResponse) => {
  if (message.type === 'UPDATE_CONTENT') {
    console.log('Received update request from background');
    sendResponse({ success: true });
  }
  return true;
});
"""

CONTENT: dict[LanguageVariant, str] = {
    LanguageVariant.PLAIN: _CONTENT_JS,
    LanguageVariant.TYPED: _CONTENT_TS,
}


def background_script(language: LanguageVariant, manifest_version: ManifestVersion) -> str:
    return BACKGROUND_HEADER[manifest_version] + BACKGROUND_BODY[language]


def content_script(language: LanguageVariant) -> str:
    return CONTENT[language]
