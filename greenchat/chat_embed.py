"""Hands the logged-in identity to the hosted chat widget.

Message transport, storage and presence all belong to the hosted service;
this module only builds the widget props and mounts the vendor SDK in an
HTML component.
"""
import json
import logging
from string import Template

import streamlit.components.v1 as components

from greenchat import config

logger = logging.getLogger(__name__)

SDK_URL = "https://esm.sh/react-chat-engine@1?deps=react@17,react-dom@17"
REACT_URL = "https://esm.sh/react@17"
REACT_DOM_URL = "https://esm.sh/react-dom@17"
WIDGET_HEIGHT = 720
# vendor offset: UTC-7
TIMEZONE_OFFSET = -7

# props key -> option that supplies it
PROP_OPTIONS = {
    "projectID": "GREENCHAT_CHAT_PROJECT_ID",
    "chatID": "GREENCHAT_COMMUNITY_CHAT_ID",
    "chatAccessKey": "GREENCHAT_COMMUNITY_CHAT_ACCESS_KEY",
}

EMBED_TEMPLATE = Template("""
<div id="chat-root" style="height: ${height}px"></div>
<script type="module">
  import React from "${react_url}";
  import ReactDOM from "${react_dom_url}";
  import { ChatEngine, ChatEngineWrapper, ChatSocket, ChatFeed } from "${sdk_url}";

  const props = ${props};
  const community = ${community};
  const h = React.createElement;
  const widget = community
    ? h(ChatEngineWrapper, null,
        h(ChatSocket, Object.assign({ offset: ${offset} }, props)),
        h(ChatFeed, { activeChat: props.chatID }))
    : h(ChatEngine, Object.assign({ offset: ${offset}, height: "${height}px" }, props));
  ReactDOM.render(widget, document.getElementById("chat-root"));
</script>
""")


def direct_messages_props(identity, project_id=None):
    return {
        "projectID": project_id if project_id is not None else config.CHAT_PROJECT_ID,
        "userName": identity["username"],
        "userSecret": identity["secret"],
    }


def community_props(identity, project_id=None, chat_id=None, access_key=None):
    return {
        "projectID": project_id if project_id is not None else config.CHAT_PROJECT_ID,
        "chatID": chat_id if chat_id is not None else config.COMMUNITY_CHAT_ID,
        "chatAccessKey": access_key if access_key is not None else config.COMMUNITY_CHAT_ACCESS_KEY,
        "senderUsername": identity["username"],
    }


def missing_options(props):
    """Names of the options that left a widget prop empty."""
    return [option for key, option in PROP_OPTIONS.items() if key in props and not props[key]]


def script_json(value):
    """JSON that cannot close or break out of the surrounding script element."""
    return json.dumps(value).replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def embed_html(props, community=False, height=WIDGET_HEIGHT):
    return EMBED_TEMPLATE.substitute(
        height=height,
        react_url=REACT_URL,
        react_dom_url=REACT_DOM_URL,
        sdk_url=SDK_URL,
        props=script_json(props),
        community=script_json(community),
        offset=TIMEZONE_OFFSET,
    )


def render_chat(props, community=False, height=WIDGET_HEIGHT):
    logger.debug(f"Mounting {'community' if community else 'direct messages'} widget")
    components.html(embed_html(props, community=community, height=height), height=height, scrolling=True)
