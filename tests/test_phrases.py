from standby import phrases


def test_phrase_set() -> None:
    assert len(phrases.ONE_MORE_PHRASES) >= 100
    assert ("One more", "English") in phrases.ONE_MORE_PHRASES
    assert all(phrase and language
               for phrase, language in phrases.ONE_MORE_PHRASES)


def test_random_one_more(mocker) -> None:
    choice = mocker.patch("standby.phrases.random.choice",
                          side_effect=lambda seq: seq[-1])
    assert phrases.random_one_more() == phrases.ONE_MORE_PHRASES[-1]
    choice.assert_called_once_with(phrases.ONE_MORE_PHRASES)
