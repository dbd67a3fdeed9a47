# -*- coding: utf-8 -*-

################################################################################
## Form generated from reading UI file 'fetch_panel.ui'
##
## Created by: Qt User Interface Compiler version 6.9.1
##
## WARNING! All changes made in this file will be lost when recompiling UI file!
################################################################################

from PySide6.QtCore import (QCoreApplication, QMetaObject, Qt)
from PySide6.QtWidgets import (QHBoxLayout, QLabel, QLineEdit,
    QPlainTextEdit, QProgressBar, QPushButton, QSplitter, QToolButton,
    QVBoxLayout, QWidget)

class Ui_fetch_panel(object):
    def setupUi(self, fetch_panel):
        if not fetch_panel.objectName():
            fetch_panel.setObjectName(u"fetch_panel")
        fetch_panel.resize(900, 700)
        self.verticalLayout = QVBoxLayout(fetch_panel)
        self.verticalLayout.setObjectName(u"verticalLayout")
        self.horizontalLayout = QHBoxLayout()
        self.horizontalLayout.setObjectName(u"horizontalLayout")
        self.editUrl = QLineEdit(fetch_panel)
        self.editUrl.setObjectName(u"editUrl")
        self.editUrl.setClearButtonEnabled(True)

        self.horizontalLayout.addWidget(self.editUrl)

        self.btnConnect = QPushButton(fetch_panel)
        self.btnConnect.setObjectName(u"btnConnect")
        self.btnConnect.setDefault(True)

        self.horizontalLayout.addWidget(self.btnConnect)

        self.btnCancel = QPushButton(fetch_panel)
        self.btnCancel.setObjectName(u"btnCancel")
        self.btnCancel.setEnabled(False)

        self.horizontalLayout.addWidget(self.btnCancel)


        self.verticalLayout.addLayout(self.horizontalLayout)

        self.progressBar = QProgressBar(fetch_panel)
        self.progressBar.setObjectName(u"progressBar")
        self.progressBar.setMaximum(0)
        self.progressBar.setTextVisible(False)
        self.progressBar.setVisible(False)

        self.verticalLayout.addWidget(self.progressBar)

        self.lblTitleCaption = QLabel(fetch_panel)
        self.lblTitleCaption.setObjectName(u"lblTitleCaption")

        self.verticalLayout.addWidget(self.lblTitleCaption)

        self.textTitle = QLabel(fetch_panel)
        self.textTitle.setObjectName(u"textTitle")
        self.textTitle.setTextFormat(Qt.TextFormat.PlainText)
        self.textTitle.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.textTitle.setWordWrap(True)

        self.verticalLayout.addWidget(self.textTitle)

        self.splitter = QSplitter(fetch_panel)
        self.splitter.setObjectName(u"splitter")
        self.splitter.setOrientation(Qt.Orientation.Vertical)
        self.textHtml = QPlainTextEdit(self.splitter)
        self.textHtml.setObjectName(u"textHtml")
        self.textHtml.setReadOnly(True)
        self.splitter.addWidget(self.textHtml)
        self.logBox = QWidget(self.splitter)
        self.logBox.setObjectName(u"logBox")
        self.verticalLayout_2 = QVBoxLayout(self.logBox)
        self.verticalLayout_2.setObjectName(u"verticalLayout_2")
        self.verticalLayout_2.setContentsMargins(0, 0, 0, 0)
        self.horizontalLayout_2 = QHBoxLayout()
        self.horizontalLayout_2.setObjectName(u"horizontalLayout_2")
        self.lbl_logs = QLabel(self.logBox)
        self.lbl_logs.setObjectName(u"lbl_logs")

        self.horizontalLayout_2.addWidget(self.lbl_logs)

        self.btnInfo = QToolButton(self.logBox)
        self.btnInfo.setObjectName(u"btnInfo")
        self.btnInfo.setCheckable(True)
        self.btnInfo.setChecked(True)

        self.horizontalLayout_2.addWidget(self.btnInfo)

        self.btnWarn = QToolButton(self.logBox)
        self.btnWarn.setObjectName(u"btnWarn")
        self.btnWarn.setCheckable(True)
        self.btnWarn.setChecked(True)

        self.horizontalLayout_2.addWidget(self.btnWarn)

        self.btnError = QToolButton(self.logBox)
        self.btnError.setObjectName(u"btnError")
        self.btnError.setCheckable(True)
        self.btnError.setChecked(True)

        self.horizontalLayout_2.addWidget(self.btnError)

        self.btnClearLog = QToolButton(self.logBox)
        self.btnClearLog.setObjectName(u"btnClearLog")

        self.horizontalLayout_2.addWidget(self.btnClearLog)


        self.verticalLayout_2.addLayout(self.horizontalLayout_2)

        self.logOutput = QPlainTextEdit(self.logBox)
        self.logOutput.setObjectName(u"logOutput")
        self.logOutput.setReadOnly(True)

        self.verticalLayout_2.addWidget(self.logOutput)

        self.splitter.addWidget(self.logBox)

        self.verticalLayout.addWidget(self.splitter)

        self.lblStatus = QLabel(fetch_panel)
        self.lblStatus.setObjectName(u"lblStatus")

        self.verticalLayout.addWidget(self.lblStatus)


        self.retranslateUi(fetch_panel)

        QMetaObject.connectSlotsByName(fetch_panel)
    # setupUi

    def retranslateUi(self, fetch_panel):
        fetch_panel.setWindowTitle(QCoreApplication.translate("fetch_panel", u"Form", None))
        self.editUrl.setPlaceholderText(QCoreApplication.translate("fetch_panel", u"example.com", None))
        self.btnConnect.setText(QCoreApplication.translate("fetch_panel", u"Connect", None))
        self.btnCancel.setText(QCoreApplication.translate("fetch_panel", u"Cancel", None))
        self.lblTitleCaption.setText(QCoreApplication.translate("fetch_panel", u"Title", None))
        self.textTitle.setText("")
        self.lbl_logs.setText(QCoreApplication.translate("fetch_panel", u"Logs", None))
        self.btnInfo.setText(QCoreApplication.translate("fetch_panel", u"INFO", None))
        self.btnWarn.setText(QCoreApplication.translate("fetch_panel", u"WARN", None))
        self.btnError.setText(QCoreApplication.translate("fetch_panel", u"ERROR", None))
        self.btnClearLog.setText(QCoreApplication.translate("fetch_panel", u"CLEAR", None))
        self.lblStatus.setText("")
    # retranslateUi
