"""UI label tables for the two supported interface languages."""

LANG_CONFIG = {
    "ZH": {
        "app_title": "单词背诵助手",
        "welcome_hint": "上传你的单词文本文件 (txt) 开始学习。",
        "format_example": "格式示例：apple;苹果 (每行一个)",
        "upload": "上传单词文件",
        "paste_hint": "或在此粘贴单词列表",
        "import_pasted": "导入粘贴内容",
        "path_hint": "文件路径 (.txt)",
        "import_success": "成功导入 {count} 个单词！",
        "import_empty": "未能识别文件内容，请检查格式是否为：单词;中文释义",
        "import_failed": "文件读取失败",
        "drop_txt_only": "请拖入 .txt 文件",
        "shuffle": "打乱顺序",
        "clear": "清空数据",
        "clear_confirm": "确定要清空所有数据吗？你需要重新上传文件。",
        "reset": "重置进度",
        "reset_confirm": "确定要重置所有学习进度吗？所有单词将变为“陌生”状态。",
        "confirm": "确定",
        "cancel": "取消",
        "familiar": "熟悉",
        "unknown": "陌生",
        "total": "总计",
        "mode_flashcard": "翻卡",
        "mode_dictation": "默写",
        "mode_list": "列表",
        "filter_all": "复习全部",
        "filter_unknown": "只看陌生",
        "empty_view": "没有需要复习的单词！",
        "show_all": "查看全部单词",
        "progress": "单词 {position} / {total}",
        "direction_term_first": "先英后中",
        "direction_definition_first": "先中后英",
        "label_term": "Term",
        "label_definition": "Definition",
        "tap_to_flip": "点击翻面",
        "dictation_placeholder": "Type the English term...",
        "check": "Check Answer",
        "next": "Next Word",
        "correct": "🎉 Correct!",
        "incorrect": "Incorrect",
        "reveal": "显示正确答案",
        "rate_unknown": "陌生 / 忘记了",
        "rate_familiar": "熟悉 / 记住了",
        "prev": "Prev",
        "skip": "Skip →",
    },
    "EN": {
        "app_title": "WordMaster",
        "welcome_hint": "Upload a vocabulary text file (txt) to start studying.",
        "format_example": "Format: apple;苹果 (one per line)",
        "upload": "Upload word file",
        "paste_hint": "Or paste your word list here",
        "import_pasted": "Import pasted text",
        "path_hint": "File path (.txt)",
        "import_success": "Imported {count} words!",
        "import_empty": "No words recognized. Expected format: term;definition",
        "import_failed": "Could not read file",
        "drop_txt_only": "Please drop a .txt file",
        "shuffle": "Shuffle",
        "clear": "Clear data",
        "clear_confirm": "Clear all data? You will need to upload the file again.",
        "reset": "Reset progress",
        "reset_confirm": "Reset all progress? Every word will be marked unknown.",
        "confirm": "OK",
        "cancel": "Cancel",
        "familiar": "Familiar",
        "unknown": "Unknown",
        "total": "Total",
        "mode_flashcard": "Cards",
        "mode_dictation": "Dictation",
        "mode_list": "List",
        "filter_all": "All words",
        "filter_unknown": "Unknown only",
        "empty_view": "Nothing left to review!",
        "show_all": "Show all words",
        "progress": "Word {position} / {total}",
        "direction_term_first": "Term first",
        "direction_definition_first": "Definition first",
        "label_term": "Term",
        "label_definition": "Definition",
        "tap_to_flip": "Tap to flip",
        "dictation_placeholder": "Type the English term...",
        "check": "Check Answer",
        "next": "Next Word",
        "correct": "🎉 Correct!",
        "incorrect": "Incorrect",
        "reveal": "Show answer",
        "rate_unknown": "Unknown / Forgot",
        "rate_familiar": "Familiar / Got it",
        "prev": "Prev",
        "skip": "Skip →",
    },
}


def get_strings(lang: str) -> dict:
    """Label table for `lang`, falling back to Chinese."""
    return LANG_CONFIG.get(lang.upper(), LANG_CONFIG["ZH"])
