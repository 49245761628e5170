"""Tests for private commands"""

from unittest import mock

import pytest

from nationscripts.api import NSAPI
from nationscripts.commands import CommandState, DispatchCommand, dispatch_id, rmb_post_id
from nationscripts.enums import DispatchSubcategory
from nationscripts.exceptions import MissingArgumentsError, RemoteError

PREPARED = "<NATION id='testlandia'><SUCCESS>a1b2c3</SUCCESS></NATION>"


def success(message: str) -> str:
    return f"<NATION id='testlandia'><SUCCESS>{message}</SUCCESS></NATION>"


class TestTwoStep:
    def test_prepare_then_execute(self, authed_api: NSAPI, session: mock.Mock, reply, sent) -> None:
        reply(PREPARED, success("Card gifted."))
        command = authed_api.giftcard("Testlandia").set_card(11, 2).set_recipient("New Leftopia")

        assert command.state is CommandState.UNSENT
        assert command.send() == "Card gifted."
        assert command.state is CommandState.EXECUTED
        assert session.post.call_count == 2

        assert sent(0) == {
            "c": "giftcard",
            "nation": "testlandia",
            "mode": "prepare",
            "cardid": "11",
            "season": "2",
            "to": "new_leftopia",
        }
        assert sent(1)["mode"] == "execute"
        assert sent(1)["token"] == "a1b2c3"

    def test_credential_is_sent_on_both_steps(
        self, authed_api: NSAPI, session: mock.Mock, reply
    ) -> None:
        reply(PREPARED, success("Card gifted."))
        authed_api.giftcard("Testlandia").set_card(11, 2).set_recipient("Testregionia").send()

        for call in session.post.call_args_list:
            assert call.kwargs["headers"]["X-Password"] == "hunter2"

    def test_missing_token_fails(self, authed_api: NSAPI, session: mock.Mock, reply) -> None:
        reply("<NATION id='testlandia'></NATION>")
        command = authed_api.giftcard("Testlandia").set_card(11, 2).set_recipient("Testregionia")

        with pytest.raises(RemoteError):
            command.send()

        assert command.state is CommandState.FAILED
        assert session.post.call_count == 1

    def test_prepare_error_fails(self, authed_api: NSAPI, session: mock.Mock, reply) -> None:
        reply("<NATION id='testlandia'><ERROR>You do not own this card.</ERROR></NATION>")
        command = authed_api.giftcard("Testlandia").set_card(11, 2).set_recipient("Testregionia")

        with pytest.raises(RemoteError) as info:
            command.send()

        assert info.value.message == "You do not own this card."
        assert command.state is CommandState.FAILED
        assert session.post.call_count == 1

    def test_resend_starts_with_prepare(self, authed_api: NSAPI, reply, sent) -> None:
        reply(PREPARED, success("Done."), PREPARED, success("Done."))
        command = authed_api.giftcard("Testlandia").set_card(11, 2).set_recipient("Testregionia")
        command.send()
        command.send()

        assert sent(2)["mode"] == "prepare"
        assert "token" not in sent(2)


class TestDispatch:
    def test_create(self, authed_api: NSAPI, reply, sent) -> None:
        reply(
            PREPARED,
            success(
                'New factbook posted! &lt;a href="/page=dispatch/id=1234567"&gt;View&lt;/a&gt;'
            ),
        )
        command = authed_api.create_dispatch("Testlandia").set_dispatch_options(
            title="Hello", text="[b]World[/b]", category=DispatchSubcategory.META_REFERENCE
        )

        assert command.send() == 1234567
        arguments = sent(1)
        assert arguments["dispatch"] == "add"
        assert arguments["title"] == "Hello"
        assert arguments["text"] == "[b]World[/b]"
        assert arguments["category"] == "8"
        assert arguments["subcategory"] == "845"

    def test_create_requires_content(self, authed_api: NSAPI, session: mock.Mock) -> None:
        command = authed_api.create_dispatch("Testlandia").set_dispatch_title("Hello")
        with pytest.raises(MissingArgumentsError) as info:
            command.send()

        assert info.value.missing == ["text", "category", "subcategory"]
        session.post.assert_not_called()

    def test_edit_requires_id(self, authed_api: NSAPI, session: mock.Mock) -> None:
        command = authed_api.edit_dispatch("Testlandia").set_dispatch_options(
            title="Hello", text="World", category=DispatchSubcategory.FACTBOOK_OVERVIEW
        )
        with pytest.raises(MissingArgumentsError) as info:
            command.send()

        assert info.value.missing == ["dispatchid"]
        session.post.assert_not_called()

    def test_remove(self, authed_api: NSAPI, reply, sent) -> None:
        reply(PREPARED, success("Remove dispatch 98765? Done."))
        assert authed_api.delete_dispatch("Testlandia").target_dispatch(98765).send() == 98765
        assert sent(1)["dispatch"] == "remove"
        assert sent(1)["dispatchid"] == "98765"
        assert "title" not in sent(1)

    def test_unknown_category(self, authed_api: NSAPI) -> None:
        with pytest.raises(ValueError):
            authed_api.create_dispatch("Testlandia").set_dispatch_category("Meta:Nonsense")

    def test_every_subcategory_has_codes(self) -> None:
        for subcategory in DispatchSubcategory:
            assert subcategory.value in DispatchCommand.CATEGORIES


class TestRMBPost:
    def test_post(self, authed_api: NSAPI, reply, sent) -> None:
        reply(
            PREPARED,
            success(
                "Your message has been lodged! &lt;a href=\"/region=testregionia/"
                "page=display_region_rmb?postid=1234#p1234\"&gt;View&lt;/a&gt;"
            ),
        )
        command = authed_api.rmb_post("Testlandia").set_post("Testregionia", "Hello 1 2 3")

        assert command.send() == 1234
        assert sent(1)["region"] == "testregionia"
        assert sent(1)["text"] == "Hello 1 2 3"


class TestIssue:
    def test_answer(self, authed_api: NSAPI, session: mock.Mock, reply, sent) -> None:
        reply(
            """<NATION id="testlandia">
                <ISSUE id="407" choice="1">
                    <OK>1</OK>
                    <DESC>The nation is now safer.</DESC>
                    <RANKINGS>
                        <RANK id="0"><SCORE>67.73</SCORE><CHANGE>0.55</CHANGE><PCHANGE>0.818409</PCHANGE></RANK>
                    </RANKINGS>
                    <UNLOCKS><BANNER>b14</BANNER></UNLOCKS>
                    <RECLASSIFICATIONS>
                        <RECLASSIFY type="1"><FROM>Strong</FROM><TO>Very Strong</TO></RECLASSIFY>
                    </RECLASSIFICATIONS>
                    <NEW_POLICIES>
                        <POLICY><NAME>Helmet Law</NAME><PIC>p1</PIC><CAT>Law</CAT><DESC>Helmets.</DESC></POLICY>
                    </NEW_POLICIES>
                    <HEADLINES><HEADLINE>Helmets Mandatory</HEADLINE></HEADLINES>
                </ISSUE>
            </NATION>"""
        )
        answer = authed_api.issue("Testlandia").select(407, 1).send()

        assert session.post.call_count == 1
        assert sent() == {"c": "issue", "nation": "testlandia", "issue": "407", "option": "1"}

        assert answer.id == 407
        assert answer.choice == 1
        assert answer.ok is True
        assert answer.description == "The nation is now safer."
        assert answer.headlines == ["Helmets Mandatory"]
        assert answer.unlockedBanners == ["b14"]
        assert [policy.name for policy in answer.policyChanges.added] == ["Helmet Law"]
        assert answer.policyChanges.removed == []
        assert answer.censusChanges[0].change == 0.55
        assert answer.reclassifications is not None
        assert answer.reclassifications.economy is not None
        assert answer.reclassifications.economy.after == "Very Strong"
        assert answer.reclassifications.civilRights is None

    def test_error(self, authed_api: NSAPI, reply) -> None:
        reply(
            '<NATION id="testlandia"><ISSUE id="407" choice="9">'
            "<ERROR>Invalid choice.</ERROR></ISSUE></NATION>"
        )
        with pytest.raises(RemoteError) as info:
            authed_api.issue("Testlandia").select(407, 9).send()

        assert info.value.message == "Invalid choice."

    def test_requires_selection(self, authed_api: NSAPI, session: mock.Mock) -> None:
        with pytest.raises(MissingArgumentsError) as info:
            authed_api.issue("Testlandia").send()

        assert info.value.missing == ["issue", "option"]
        session.post.assert_not_called()


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ('<a href="/page=rmb/postid=52#p52">View</a>', 52),
        ("Posted, see #p77", 77),
        ("No link here", None),
        (None, None),
    ],
)
def test_rmb_post_id(message, expected) -> None:
    assert rmb_post_id(message) == expected


def test_dispatch_id() -> None:
    assert dispatch_id('<a href="/page=dispatch/id=42">') == 42
    assert dispatch_id("Dispatch filed.") is None
