"""QML source for the ShapePaint window."""

SHAPEPAINT_QML = r"""
import QtQuick 2.15
import QtQuick.Controls 2.15
import QtQuick.Dialogs
import QtQuick.Layouts 1.15
import ShapePaint 1.0

ApplicationWindow {
    id: root
    visible: true
    width: 1280
    height: 720
    color: "#404040"
    title: "ShapePaint"

    property bool panning: false
    property real lastPanX: 0
    property real lastPanY: 0

    function showGeneratedCode() {
        codeDialog.code = paintModel.generateCode(targetCombo.currentText)
        codeDialog.open()
    }

    Shortcut {
        sequences: [StandardKey.Undo]
        onActivated: paintModel.undo()
    }

    Shortcut {
        sequence: "Escape"
        onActivated: paintModel.cancelGesture()
    }

    ColumnLayout {
        anchors.fill: parent
        spacing: 0

        PaintCanvas {
            id: canvas
            objectName: "paintCanvas"
            Layout.fillWidth: true
            Layout.fillHeight: true
            model: paintModel

            MouseArea {
                anchors.fill: parent
                acceptedButtons: Qt.LeftButton | Qt.MiddleButton
                preventStealing: true

                onPressed: function(mouse) {
                    if (mouse.button === Qt.MiddleButton) {
                        root.panning = true
                        root.lastPanX = mouse.x
                        root.lastPanY = mouse.y
                    } else if (mouse.button === Qt.LeftButton) {
                        paintModel.pressAt(mouse.x, mouse.y)
                    }
                }

                onPositionChanged: function(mouse) {
                    if (root.panning) {
                        paintModel.panBy(mouse.x - root.lastPanX, mouse.y - root.lastPanY)
                        root.lastPanX = mouse.x
                        root.lastPanY = mouse.y
                    } else if (mouse.buttons & Qt.LeftButton) {
                        paintModel.dragTo(mouse.x, mouse.y)
                    }
                }

                onReleased: function(mouse) {
                    if (mouse.button === Qt.MiddleButton) {
                        root.panning = false
                    } else if (mouse.button === Qt.LeftButton) {
                        paintModel.releaseAt()
                    }
                }

                onWheel: function(wheel) {
                    paintModel.zoomAt(wheel.x, wheel.y, wheel.angleDelta.y)
                }
            }
        }

        Rectangle {
            Layout.fillWidth: true
            Layout.preferredHeight: toolsRow.implicitHeight + 16
            color: "#b5b5b5"

            Flow {
                id: toolsRow
                anchors.fill: parent
                anchors.margins: 8
                spacing: 8

                Button {
                    text: "Done"
                    visible: paintModel.isPolygonTool
                    enabled: paintModel.pendingVertexCount > 2
                    onClicked: paintModel.finishPolygon()
                }

                Label { text: "Shape:"; height: toolCombo.height; verticalAlignment: Text.AlignVCenter }
                ComboBox {
                    id: toolCombo
                    model: paintModel.toolNames
                    currentIndex: Math.max(0, paintModel.toolNames.indexOf(paintModel.tool))
                    onActivated: function(index) { paintModel.setTool(textAt(index)) }
                }

                Button {
                    text: "Choose Color"
                    onClicked: drawColorDialog.open()
                    contentItem: Label {
                        text: parent.text
                        leftPadding: 18
                        verticalAlignment: Text.AlignVCenter
                        Rectangle { width: 12; height: 12; anchors.verticalCenter: parent.verticalCenter; color: paintModel.drawColor; border.color: "#202020" }
                    }
                }

                Button {
                    text: "Choose Fill Color"
                    onClicked: fillColorDialog.open()
                    contentItem: Label {
                        text: parent.text
                        leftPadding: 18
                        verticalAlignment: Text.AlignVCenter
                        Rectangle { width: 12; height: 12; anchors.verticalCenter: parent.verticalCenter; color: paintModel.fillColor; border.color: "#202020" }
                    }
                }

                Button {
                    text: "Change Canvas Color"
                    onClicked: backgroundColorDialog.open()
                }

                CheckBox {
                    text: "Fill Shape"
                    checked: paintModel.fillEnabled
                    onToggled: paintModel.setFillEnabled(checked)
                }

                Label { text: "Stroke Width:"; height: widthSpin.height; verticalAlignment: Text.AlignVCenter }
                SpinBox {
                    id: widthSpin
                    from: 1
                    to: 10
                    value: paintModel.strokeWidth
                    onValueModified: paintModel.setStrokeWidth(value)
                }

                Label { text: "Width:"; height: widthField.height; verticalAlignment: Text.AlignVCenter }
                TextField {
                    id: widthField
                    implicitWidth: 64
                    text: paintModel.canvasWidth.toString()
                }
                Label { text: "Height:"; height: heightField.height; verticalAlignment: Text.AlignVCenter }
                TextField {
                    id: heightField
                    implicitWidth: 64
                    text: paintModel.canvasHeight.toString()
                }
                Button {
                    text: "Set Canvas Size"
                    onClicked: paintModel.applyCanvasSize(widthField.text, heightField.text)
                }
                Label {
                    visible: paintModel.lastError.length > 0
                    text: paintModel.lastError
                    color: "#b00020"
                    height: heightField.height
                    verticalAlignment: Text.AlignVCenter
                }

                Button {
                    text: "Undo (Ctrl+Z)"
                    enabled: paintModel.canUndo
                    onClicked: paintModel.undo()
                }

                Button {
                    text: "Reset View"
                    onClicked: paintModel.resetView()
                }

                ComboBox {
                    id: targetCombo
                    model: paintModel.codeTargets
                }
                Button {
                    text: "Generate Code"
                    onClicked: root.showGeneratedCode()
                }
                Button {
                    objectName: "copyImageButton"
                    text: "Copy Image"
                    onClicked: paintModel.copyImageToClipboard()
                }
            }
        }
    }

    ColorDialog {
        id: drawColorDialog
        title: "Choose Draw Color"
        selectedColor: paintModel.drawColor
        onAccepted: paintModel.setDrawColor(selectedColor.toString())
    }

    ColorDialog {
        id: fillColorDialog
        title: "Choose Fill Color"
        selectedColor: paintModel.fillColor
        onAccepted: paintModel.setFillColor(selectedColor.toString())
    }

    ColorDialog {
        id: backgroundColorDialog
        title: "Choose Canvas Background Color"
        selectedColor: paintModel.backgroundColor
        onAccepted: paintModel.setBackgroundColor(selectedColor.toString())
    }

    Dialog {
        id: codeDialog
        title: "Generated Code"
        modal: true
        standardButtons: Dialog.Close
        anchors.centerIn: Overlay.overlay
        width: Math.min(root.width - 80, 900)
        height: Math.min(root.height - 80, 640)

        property string code: ""

        ColumnLayout {
            anchors.fill: parent
            spacing: 8

            ScrollView {
                Layout.fillWidth: true
                Layout.fillHeight: true

                TextArea {
                    text: codeDialog.code
                    readOnly: true
                    selectByMouse: true
                    font.family: "monospace"
                    wrapMode: TextArea.NoWrap
                }
            }

            Button {
                Layout.alignment: Qt.AlignRight
                text: "Copy to Clipboard"
                onClicked: paintModel.copyCodeToClipboard(targetCombo.currentText)
            }
        }
    }
}
"""
